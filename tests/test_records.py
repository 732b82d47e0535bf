from datetime import datetime

import pytest

from shelfkeeper.records import (
    Book,
    LentBook,
    User,
    format_timestamp,
    parse_books,
    parse_lent_books,
    parse_users,
)


def _books():
    return [
        Book(1, "Dune", "Herbert", 412, 1965, 3),
        Book(7, "Emma", "Austen", 300, 1815, 0),
    ]


def _lent():
    return [
        LentBook(1, "Dune", "Alice", 42, "2024-01-02-10:00"),
        LentBook(7, "Emma", "Bob", 43, "2024-01-03-11:30", "2024-01-05-09:15"),
    ]


def test_book_line_layout():
    assert Book(1, "Dune", "Herbert", 412, 1965, 3).to_line() == "1 Dune Herbert 412 1965 3"


def test_user_line_layout():
    assert User("alice", "password").to_line() == "alice password"


def test_users_round_trip():
    users = [User("alice", "password"), User("bob", "secret")]
    text = "\n".join(u.to_line() for u in users) + "\n"
    assert parse_users(text) == users


def test_users_incomplete_trailing_record_ignored():
    assert parse_users("alice password\nbob") == [User("alice", "password")]


def test_books_round_trip():
    books = _books()
    text = "\n".join(b.to_line() for b in books) + "\n"
    assert parse_books(text) == books


def test_books_stop_at_malformed_record():
    text = _books()[0].to_line() + "\nx Emma Austen 300 1815 0\n" + _books()[1].to_line()
    assert parse_books(text) == [_books()[0]]


def test_books_out_of_range_integer_stops():
    text = _books()[0].to_line() + "\n99999999999 Emma Austen 300 1815 0\n"
    assert parse_books(text) == [_books()[0]]


def test_books_empty_text():
    assert parse_books("") == []


def test_lent_round_trip():
    records = _lent()
    text = "\n".join(r.to_line() for r in records) + "\n"
    assert parse_lent_books(text) == records


def test_lent_default_return_time():
    record = LentBook(1, "Dune", "Alice", 42, "2024-01-02-10:00")
    assert record.return_time == "Not-Returned"
    assert record.to_line().endswith(" Not-Returned")


def test_lent_empty_return_time_normalised():
    record = LentBook(1, "Dune", "Alice", 42, "2024-01-02-10:00", "")
    assert record.return_time == "Not-Returned"
    assert record.is_returned() is False


@pytest.mark.parametrize(
    ("return_time", "expected"),
    [("Not-Returned", False), ("2024-01-05-09:15", True)],
)
def test_lent_is_returned(return_time, expected):
    record = LentBook(1, "Dune", "Alice", 42, "2024-01-02-10:00", return_time)
    assert record.is_returned() is expected


def test_lent_stops_at_bad_student_id():
    text = _lent()[0].to_line() + "\n7 Emma Bob abc 2024-01-03-11:30 Not-Returned\n"
    assert parse_lent_books(text) == [_lent()[0]]


def test_format_timestamp_pins_layout():
    assert format_timestamp(datetime(2024, 5, 1, 9, 7)) == "2024-05-01-09:07"


def test_timestamp_is_single_token_in_record():
    stamp = format_timestamp(datetime(2023, 12, 31, 23, 59))
    record = LentBook(3, "Ulysses", "Carol", 5, stamp, stamp)
    parsed = parse_lent_books(record.to_line())
    assert parsed == [record]
    assert parsed[0].lend_time == stamp