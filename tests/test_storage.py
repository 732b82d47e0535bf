import logging

import pytest

from shelfkeeper.records import NOT_RETURNED, Book, LentBook, User
from shelfkeeper.storage import LibraryStore


@pytest.fixture
def store(tmp_path):
    return LibraryStore(tmp_path)


def test_file_names(tmp_path):
    store = LibraryStore(tmp_path)
    assert store.users_path == tmp_path / "users.txt"
    assert store.books_path == tmp_path / "books.txt"
    assert store.lent_books_path == tmp_path / "lent_books.txt"


def test_missing_files_load_empty(store):
    assert store.load_users() == []
    assert store.load_books() == []


def test_missing_lent_file_is_reported(store, caplog):
    with caplog.at_level(logging.WARNING):
        assert store.load_lent_books() == []
    assert "lent_books.txt" in caplog.text


def test_users_round_trip(store):
    password = "password"
    users = [User("alice", password), User("bob", "secret")]
    store.save_users(users)
    assert store.load_users() == users


def test_save_users_overwrites(store):
    store.save_users([User("alice", "password")])
    store.save_users([User("bob", "secret")])
    assert store.load_users() == [User("bob", "secret")]


def test_users_file_format(store):
    store.save_users([User("alice", "password")])
    assert store.users_path.read_text(encoding="utf-8") == "alice password\n"


def test_books_round_trip(store):
    books = [
        Book(1, "Dune", "Herbert", 412, 1965, 3),
        Book(2, "Emma", "Austen", 320, 1815, 0),
    ]
    store.save_books(books)
    assert store.load_books() == books


def test_books_file_format(store):
    store.save_books([Book(1, "Dune", "Herbert", 412, 1965, 3)])
    assert store.books_path.read_text(encoding="utf-8") == "1 Dune Herbert 412 1965 3\n"


def test_save_empty_books_clears_file(store):
    store.save_books([Book(1, "Dune", "Herbert", 412, 1965, 3)])
    store.save_books([])
    assert store.books_path.read_text(encoding="utf-8") == ""
    assert store.load_books() == []


def test_lent_books_round_trip(store):
    records = [
        LentBook(1, "Dune", "Carol", 42, "2024-01-02-10:30"),
        LentBook(2, "Emma", "Dave", 7, "2024-01-03-09:00", "2024-01-05-12:15"),
    ]
    store.save_lent_books(records)
    loaded = store.load_lent_books()
    assert loaded == records
    assert loaded[0].return_time == NOT_RETURNED
    assert loaded[1].is_returned()


def test_lent_books_file_format(store):
    store.save_lent_books([LentBook(1, "Dune", "Carol", 42, "2024-01-02-10:30")])
    text = store.lent_books_path.read_text(encoding="utf-8")
    assert text == "1 Dune Carol 42 2024-01-02-10:30 Not-Returned\n"


def test_stores_in_separate_directories_are_independent(tmp_path):
    first = LibraryStore(tmp_path / "a")
    second = LibraryStore(tmp_path / "b")
    first.directory.mkdir()
    second.directory.mkdir()
    first.save_books([Book(1, "Dune", "Herbert", 412, 1965, 3)])
    assert second.load_books() == []
    assert len(first.load_books()) == 1


def test_save_into_missing_directory_raises(tmp_path):
    store = LibraryStore(tmp_path / "absent")
    with pytest.raises(FileNotFoundError):
        store.save_books([])


def test_load_books_reads_hand_written_file(store):
    store.books_path.write_text("3 Ulysses Joyce 730 1922 1\n", encoding="utf-8")
    assert store.load_books() == [Book(3, "Ulysses", "Joyce", 730, 1922, 1)]