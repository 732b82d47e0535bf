"""Resolving what a user typed into a book, by numeric id or by name."""

from __future__ import annotations

import re
from typing import Iterable

from shelfkeeper.records import Book

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class KeyOutOfRangeError(ValueError):
    """The key starts with a number too large for a book id."""


def parse_key(text: str) -> int | str:
    """Interpret ``text`` as a book id when it starts with a number, else as a name.

    Leading whitespace and a sign are accepted, and anything after the leading
    digits is ignored, so ``"12abc"`` is id 12. A number outside the 32-bit
    range raises :class:`KeyOutOfRangeError`.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return text
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise KeyOutOfRangeError(f"Input number is out of range: {text!r}")
    return value


def match_book(books: Iterable[Book], key: int | str) -> Book | None:
    """Return the first book whose id (for an int key) or name (for a str key) matches."""
    if isinstance(key, int):
        return next((book for book in books if book.id == key), None)
    return next((book for book in books if book.name == key), None)