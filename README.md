# shelfkeeper

A small console library manager. It keeps track of the books on the shelf,
the people allowed to manage them, and which student has borrowed which book
and when.

## Data files

All data lives in three plain text files in one directory. This is the
current directory unless `--data-dir` says otherwise.

- `users.txt`: one `username password` pair per line
- `books.txt`: `id name author pages year copies` per line
- `lent_books.txt`: `book_id book_name student_name student_id lend_time return_time` per line

Fields are separated by whitespace. A book that has not come back yet has
the return time `Not-Returned`. Times are written as `YYYY-MM-DD-HH:MM`.
Every change rewrites the whole file concerned.

When the files are read, an incomplete record at the end is ignored, and
reading `books.txt` or `lent_books.txt` stops at the first record whose
numeric fields are not 32-bit integers. A missing `users.txt` or `books.txt`
simply means there are none yet; a missing `lent_books.txt` is also treated
as empty, but a warning is logged.

## Installing

```
pip install .
```

## Running

```
shelfkeeper
shelfkeeper --data-dir path/to/data
```

The same menu can be started with `python -m shelfkeeper.cli`.

The first menu offers:

1. Register
2. Login
3. Exit

Once you are logged in, the library menu offers:

1. View Book List
2. Search Book & View Details
3. Add Book (it receives the next free ID)
4. Delete Book
5. Edit Book Amount (set the number of available copies)
6. Lend Book (asks for the student's name and ID and records the time)
7. Return Book (by student ID, then book ID or name)
8. View Lent Books
9. Logout

Wherever a book is asked for, you can type its numeric ID or its exact name.
Input that starts with a number is taken as an ID, so `12abc` means book 12;
a number outside the 32-bit range is reported as out of range. When
returning a book, the text must be the exact book name or the exact ID.

Where a number is expected and something else is typed, the prompt is
repeated. Ending the input (Ctrl-D, or the end of piped input) leaves the
program.

When both standard input and output are a terminal, the screen is cleared
between menus, messages are coloured, the program waits for Enter after each
library action, and passwords are typed hidden: every key shows as `*` and
backspace removes the last one. Otherwise passwords are read as a plain line
and none of the terminal effects are used.

## Using it from Python

```python
from datetime import datetime

from shelfkeeper.storage import LibraryStore
from shelfkeeper.manager import LibraryManager

manager = LibraryManager(LibraryStore("."))
manager.load()

password = "password"
manager.register_user("alice", password)
manager.login("alice", password)

book = manager.add_book("Dune", "Herbert", 412, 1965, 2)
record = manager.lend_book(str(book.id), "Bob", 1001, datetime.now())
manager.return_book(1001, "Dune", datetime.now())
```

`LibraryManager` also provides `authenticate`, `find_book`, `delete_book`
and `set_copies`, and keeps its state in the `users`, `books` and
`lent_books` lists. The `now` argument of `lend_book` and `return_book`
defaults to the current time.

Failures raise exceptions derived from `shelfkeeper.manager.LibraryError`:
`BookNotFoundError`, `NoCopiesError`, `LentRecordNotFoundError` and
`AuthenticationError`. A key holding a number outside the 32-bit range
raises `shelfkeeper.lookup.KeyOutOfRangeError`, a `ValueError`.

Lower-level pieces:

- `shelfkeeper.records`: the `User`, `Book` and `LentBook` dataclasses with
  `to_line()`, `LentBook.is_returned()`, `parse_users`, `parse_books`,
  `parse_lent_books` and `format_timestamp`.
- `shelfkeeper.storage.LibraryStore`: `load_*` and `save_*` for each file.
- `shelfkeeper.lookup`: `parse_key` and `match_book`.
- `shelfkeeper.cli`: `format_book_table`, `format_book_details`,
  `format_lent_table`, `read_masked` and `main`.

## What it does not do

- Passwords are stored in `users.txt` as plain text, without hashing.
- Being logged in does not restrict anything beyond reaching the library
  menu; there are no roles or per-user permissions.
- Because fields are separated by whitespace, names, authors and student
  names must be single words. A value with spaces is saved as typed but is
  not read back correctly the next time the files are loaded.
- There is no due date, fine or reminder for lent books.

## Tests

```
pip install .[test]
pytest
```