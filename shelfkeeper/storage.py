"""Persistence of users, books and lending records as plain text files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from shelfkeeper.records import (
    Book,
    LentBook,
    User,
    parse_books,
    parse_lent_books,
    parse_users,
)

USERS_FILE = "users.txt"
BOOKS_FILE = "books.txt"
LENT_BOOKS_FILE = "lent_books.txt"

_log = logging.getLogger(__name__)


class LibraryStore:
    """Reads and writes the library's three data files in one directory."""

    def __init__(self, directory: str | os.PathLike[str] = ".") -> None:
        self.directory = Path(directory)
        self.users_path = self.directory / USERS_FILE
        self.books_path = self.directory / BOOKS_FILE
        self.lent_books_path = self.directory / LENT_BOOKS_FILE

    @staticmethod
    def _read(path: Path) -> str | None:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    @staticmethod
    def _write(path: Path, lines: Iterable[str]) -> None:
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")

    def load_users(self) -> list[User]:
        """Return the stored users, or an empty list when there is no file."""
        text = self._read(self.users_path)
        return parse_users(text) if text is not None else []

    def save_users(self, users: Iterable[User]) -> None:
        """Replace the stored users with ``users``."""
        self._write(self.users_path, (user.to_line() for user in users))

    def load_books(self) -> list[Book]:
        """Return the stored books, or an empty list when there is no file."""
        text = self._read(self.books_path)
        return parse_books(text) if text is not None else []

    def save_books(self, books: Iterable[Book]) -> None:
        """Replace the stored books with ``books``."""
        self._write(self.books_path, (book.to_line() for book in books))

    def load_lent_books(self) -> list[LentBook]:
        """Return the stored lending records; a missing file is reported and yields none."""
        text = self._read(self.lent_books_path)
        if text is None:
            _log.warning("Unable to open file '%s'", self.lent_books_path.name)
            return []
        return parse_lent_books(text)

    def save_lent_books(self, lent_books: Iterable[LentBook]) -> None:
        """Replace the stored lending records with ``lent_books``."""
        self._write(self.lent_books_path, (lent.to_line() for lent in lent_books))