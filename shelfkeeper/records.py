"""Library records and the whitespace-separated text format they are stored in."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator

NOT_RETURNED = "Not-Returned"
TIMESTAMP_FORMAT = "%Y-%m-%d-%H:%M"

_INT_PATTERN = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass
class User:
    """A registered account."""

    username: str
    password: str

    def to_line(self) -> str:
        """Return the stored form of this user, without a line ending."""
        return f"{self.username} {self.password}"


@dataclass
class Book:
    """A title held by the library."""

    id: int
    name: str
    author: str
    pages: int
    year_released: int
    available_copies: int

    def to_line(self) -> str:
        """Return the stored form of this book, without a line ending."""
        return (
            f"{self.id} {self.name} {self.author} {self.pages} "
            f"{self.year_released} {self.available_copies}"
        )


@dataclass
class LentBook:
    """A record of one copy lent to a student."""

    book_id: int
    book_name: str
    student_name: str
    student_id: int
    lend_time: str
    return_time: str = NOT_RETURNED

    def __post_init__(self) -> None:
        if not self.return_time:
            self.return_time = NOT_RETURNED

    def to_line(self) -> str:
        """Return the stored form of this record, without a line ending."""
        return (
            f"{self.book_id} {self.book_name} {self.student_name} "
            f"{self.student_id} {self.lend_time} {self.return_time}"
        )

    def is_returned(self) -> bool:
        """True once a return time has been recorded."""
        return bool(self.return_time) and self.return_time != NOT_RETURNED


def _to_int(token: str) -> int:
    if not _INT_PATTERN.fullmatch(token):
        raise ValueError(f"not an integer: {token!r}")
    value = int(token)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {token!r}")
    return value


def _records(text: str, width: int) -> Iterator[list[str]]:
    """Yield complete groups of ``width`` whitespace-separated tokens."""
    tokens = text.split()
    for start in range(0, len(tokens) - width + 1, width):
        yield tokens[start:start + width]


def parse_users(text: str) -> list[User]:
    """Read users from stored text; an incomplete trailing record is ignored."""
    return [User(username, password) for username, password in _records(text, 2)]


def parse_books(text: str) -> list[Book]:
    """Read books from stored text, stopping at the first malformed record."""
    books = []
    for book_id, name, author, pages, year, copies in _records(text, 6):
        try:
            books.append(
                Book(
                    _to_int(book_id),
                    name,
                    author,
                    _to_int(pages),
                    _to_int(year),
                    _to_int(copies),
                )
            )
        except ValueError:
            break
    return books


def parse_lent_books(text: str) -> list[LentBook]:
    """Read lending records from stored text, stopping at the first malformed one."""
    records = []
    for book_id, book_name, student_name, student_id, lend_time, return_time in _records(text, 6):
        try:
            records.append(
                LentBook(
                    _to_int(book_id),
                    book_name,
                    student_name,
                    _to_int(student_id),
                    lend_time,
                    return_time,
                )
            )
        except ValueError:
            break
    return records


def format_timestamp(moment: datetime) -> str:
    """Render a moment in the single-token form used for lend and return times."""
    return moment.strftime(TIMESTAMP_FORMAT)