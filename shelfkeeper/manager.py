"""The library's operations: accounts, the catalogue and lending."""

from __future__ import annotations

from datetime import datetime

from shelfkeeper.lookup import match_book, parse_key
from shelfkeeper.records import NOT_RETURNED, Book, LentBook, User, format_timestamp
from shelfkeeper.storage import LibraryStore


class LibraryError(Exception):
    """Base class for failed library operations."""


class BookNotFoundError(LibraryError):
    """No book matches the given id or name."""


class NoCopiesError(LibraryError):
    """The book exists but has no copies left to lend."""


class LentRecordNotFoundError(LibraryError):
    """No lending record matches the student and book."""


class AuthenticationError(LibraryError):
    """The username and password do not match a registered user."""


class LibraryManager:
    """Holds the library's state in memory and writes every change to the store."""

    def __init__(self, store: LibraryStore) -> None:
        self.store = store
        self.users: list[User] = []
        self.books: list[Book] = []
        self.lent_books: list[LentBook] = []
        self.next_book_id = 1
        self.logged_in_user = ""

    def load(self) -> None:
        """Read users, books and lending records from the store."""
        self.users.extend(self.store.load_users())
        for book in self.store.load_books():
            self.books.append(book)
            if book.id >= self.next_book_id:
                self.next_book_id = book.id + 1
        self.lent_books.extend(self.store.load_lent_books())

    def register_user(self, username: str, password: str) -> User:
        """Add an account and save the user list."""
        user = User(username, password)
        self.users.append(user)
        self.store.save_users(self.users)
        return user

    def authenticate(self, username: str, password: str) -> bool:
        """True when the pair matches a registered user."""
        return any(
            user.username == username and user.password == password
            for user in self.users
        )

    def login(self, username: str, password: str) -> None:
        """Log the user in, or raise :class:`AuthenticationError`."""
        if not self.authenticate(username, password):
            raise AuthenticationError("Invalid username or password.")
        self.logged_in_user = username

    def find_book(self, key: str) -> Book:
        """Return the book named or numbered by ``key``."""
        book = match_book(self.books, parse_key(key))
        if book is None:
            raise BookNotFoundError(f"Book not found: {key!r}")
        return book

    def add_book(
        self,
        name: str,
        author: str,
        pages: int,
        year_released: int,
        available_copies: int,
    ) -> Book:
        """Add a book under the next free id and save the catalogue."""
        book = Book(self.next_book_id, name, author, pages, year_released, available_copies)
        self.next_book_id += 1
        self.books.append(book)
        self.store.save_books(self.books)
        return book

    def delete_book(self, key: str) -> Book:
        """Remove the book matching ``key`` and save the catalogue."""
        book = self.find_book(key)
        self.books.remove(book)
        self.store.save_books(self.books)
        return book

    def set_copies(self, key: str, amount: int) -> Book:
        """Set the number of available copies of a book."""
        book = self.find_book(key)
        book.available_copies = amount
        self.store.save_books(self.books)
        return book

    def lend_book(
        self,
        key: str,
        student_name: str,
        student_id: int,
        now: datetime | None = None,
    ) -> LentBook:
        """Lend one copy to a student, recording the time of lending."""
        book = self.find_book(key)
        if book.available_copies <= 0:
            raise NoCopiesError("No available copies to lend.")
        book.available_copies -= 1
        record = LentBook(
            book.id,
            book.name,
            student_name,
            student_id,
            format_timestamp(now or datetime.now()),
            NOT_RETURNED,
        )
        self.lent_books.append(record)
        self.store.save_books(self.books)
        self.store.save_lent_books(self.lent_books)
        return record

    def return_book(
        self,
        student_id: int,
        key: str,
        now: datetime | None = None,
    ) -> LentBook:
        """Mark the first matching lending record returned and restore a copy."""
        record = next(
            (
                lent
                for lent in self.lent_books
                if lent.student_id == student_id
                and (lent.book_name == key or str(lent.book_id) == key)
            ),
            None,
        )
        if record is None:
            raise LentRecordNotFoundError("Lent book record not found!")
        record.return_time = format_timestamp(now or datetime.now())
        book = next((book for book in self.books if book.id == record.book_id), None)
        if book is not None:
            book.available_copies += 1
        self.store.save_lent_books(self.lent_books)
        self.store.save_books(self.books)
        return record