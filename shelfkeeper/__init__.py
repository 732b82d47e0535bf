"""Console library manager for books, users and lending records kept in text files."""

__version__ = "0.1.0"