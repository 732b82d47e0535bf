"""Interactive terminal front end for the library."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, Sequence, TextIO

from shelfkeeper.lookup import KeyOutOfRangeError
from shelfkeeper.manager import (
    AuthenticationError,
    BookNotFoundError,
    LentRecordNotFoundError,
    LibraryManager,
    NoCopiesError,
)
from shelfkeeper.records import Book, LentBook
from shelfkeeper.storage import LibraryStore

_BOOK_COLUMNS = (
    ("ID", 5),
    ("Name", 20),
    ("Author", 20),
    ("Pages", 10),
    ("Year Released", 20),
    ("Available Copies", 20),
)
_LENT_HEADER_COLUMNS = (
    ("ID", 5),
    ("Name", 20),
    ("Student Name", 20),
    ("Student ID", 20),
    ("Lend Time", 20),
    ("Return Time", 20),
)
_LENT_ROW_WIDTHS = (5, 20, 20, 20, 20, 23)

_BLUE = "\033[94m"
_GREEN = "\033[92m"
_RED = "\033[91m"
_RESET = "\033[0m"

_BACKSPACES = ("\b", "\x7f")
_ENTER = ("\r", "\n", "")

_PROMPT_REGISTER_HIDDEN = "Enter new password: "
_PROMPT_LOGIN_HIDDEN = "Enter password: "


def _row(values: Iterable[object], widths: Iterable[int]) -> str:
    return "".join(f"{value!s:>{width}}" for value, width in zip(values, widths))


def format_book_table(books: Iterable[Book]) -> str:
    """Render the catalogue as a right-aligned table with a header."""
    header = _row((title for title, _ in _BOOK_COLUMNS), (w for _, w in _BOOK_COLUMNS))
    widths = [width for _, width in _BOOK_COLUMNS]
    lines = [header, "-" * len(header)]
    lines.extend(
        _row(
            (book.id, book.name, book.author, book.pages,
             book.year_released, book.available_copies),
            widths,
        )
        for book in books
    )
    return "\n".join(lines) + "\n"


def format_book_details(book: Book) -> str:
    """Render one book's fields, one per line."""
    return (
        f"Name: {book.name}\n"
        f"Author: {book.author}\n"
        f"Pages: {book.pages}\n"
        f"Year Released: {book.year_released}\n"
        f"Available Copies: {book.available_copies}\n"
    )


def _lent_row(lent: LentBook) -> str:
    return _row(
        (lent.book_id, lent.book_name, lent.student_name,
         lent.student_id, lent.lend_time, lent.return_time),
        _LENT_ROW_WIDTHS,
    )


def format_lent_table(lent_books: Iterable[LentBook]) -> str:
    """Render the lending records as a right-aligned table with a header."""
    header = _row(
        (title for title, _ in _LENT_HEADER_COLUMNS),
        (w for _, w in _LENT_HEADER_COLUMNS),
    )
    lines = [header, "-" * len(header)]
    lines.extend(_lent_row(lent) for lent in lent_books)
    return "\n".join(lines) + "\n"


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _terminal_getch() -> str:
    """Read one key from the terminal without echoing it."""
    try:
        import msvcrt
    except ImportError:
        import termios
        import tty

        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            ch = sys.stdin.read(1)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    else:
        ch = msvcrt.getwch()
    if ch == "\x03":
        raise KeyboardInterrupt
    return ch


def read_masked(
    getch: Callable[[], str] | None = None,
    echo: Callable[[str], object] | None = None,
) -> str:
    """Read keys until Enter, echoing ``*`` for each one and honouring backspace."""
    getch = getch or _terminal_getch
    echo = echo or _write_stdout
    chars: list[str] = []
    while (ch := getch()) not in _ENTER:
        if ch in _BACKSPACES and chars:
            echo("\b \b")
            chars.pop()
        else:
            chars.append(ch)
            echo("*")
    echo("\n")
    return "".join(chars)


class _Console:
    """Line-oriented prompts over a pair of text streams."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.interactive = stdin.isatty() and stdout.isatty()

    def write(self, text: str, color: str | None = None) -> None:
        if color and self.interactive:
            text = f"{color}{text}{_RESET}"
        self.stdout.write(text)
        self.stdout.flush()

    def say(self, text: str, color: str | None = None) -> None:
        self.write(f"{text}\n", color)

    def _readline(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def line(self, prompt: str) -> str:
        self.write(prompt)
        return self._readline()

    def token(self, prompt: str) -> str:
        self.write(prompt)
        while not (parts := self._readline().split()):
            pass
        return parts[0]

    def integer(self, prompt: str) -> int:
        while True:
            text = self.token(prompt)
            try:
                return int(text)
            except ValueError:
                self.say("Please enter a whole number.", _RED)

    def password(self, prompt: str) -> str:
        self.write(prompt)
        if self.interactive:
            return read_masked(_terminal_getch, self.write)
        return self._readline()

    def clear(self) -> None:
        if self.interactive:
            self.write("\033[2J\033[H")

    def pause(self) -> None:
        if self.interactive:
            self.line("Press Enter to continue . . . ")


def _find(console: _Console, manager: LibraryManager, key: str) -> Book | None:
    try:
        return manager.find_book(key)
    except KeyOutOfRangeError:
        console.say("Input number is out of range", _RED)
    except BookNotFoundError:
        console.say("Book not found!", _RED)
    return None


def _register(console: _Console, manager: LibraryManager) -> None:
    console.clear()
    username = console.token("Enter new username: ")
    password = console.password(_PROMPT_REGISTER_HIDDEN)
    manager.register_user(username, password)
    console.say("User registered successfully!", _GREEN)


def _login(console: _Console, manager: LibraryManager) -> bool:
    console.clear()
    username = console.line("Enter username: ")
    password = console.password(_PROMPT_LOGIN_HIDDEN)
    try:
        manager.login(username, password)
    except AuthenticationError:
        console.say("Invalid username or password.", _RED)
        return False
    console.say("Login successful.", _GREEN)
    return True


def _view_books(console: _Console, manager: LibraryManager) -> None:
    console.clear()
    console.write(format_book_table(manager.books))


def _view_details(console: _Console, manager: LibraryManager) -> None:
    console.clear()
    book = _find(console, manager, console.line("Enter book ID or Name: "))
    if book is not None:
        console.write(format_book_details(book))


def _add_book(console: _Console, manager: LibraryManager) -> None:
    console.clear()
    name = console.line("Enter book name: ")
    author = console.line("Enter author name: ")
    pages = console.integer("Enter number of pages: ")
    year = console.integer("Enter year released: ")
    copies = console.integer("Enter available copies: ")
    manager.add_book(name, author, pages, year, copies)
    console.say("Book added successfully!", _GREEN)


def _delete_book(console: _Console, manager: LibraryManager) -> None:
    console.clear()
    book = _find(console, manager, console.token("Enter book ID or Name to delete: "))
    if book is not None:
        manager.delete_book(str(book.id))
        console.say("Book deleted successfully!", _GREEN)


def _edit_amount(console: _Console, manager: LibraryManager) -> None:
    console.clear()
    book = _find(console, manager, console.line("Enter book ID or book name to edit: "))
    if book is not None:
        amount = console.integer("Enter new amount: ")
        manager.set_copies(str(book.id), amount)
        console.say("Book amount updated successfully!", _GREEN)


def _lend_book(console: _Console, manager: LibraryManager) -> None:
    console.clear()
    book = _find(console, manager, console.line("Enter book ID or Name to lend: "))
    if book is None:
        return
    if book.available_copies <= 0:
        console.say("No available copies to lend.", _RED)
        return
    student_name = console.line("Enter student name: ")
    student_id = console.integer("Enter student ID: ")
    try:
        manager.lend_book(str(book.id), student_name, student_id)
    except NoCopiesError:
        console.say("No available copies to lend.", _RED)
        return
    console.say("Book lent successfully!", _GREEN)


def _return_book(console: _Console, manager: LibraryManager) -> None:
    console.clear()
    student_id = console.integer("Enter student ID: ")
    key = console.line("Enter book ID or Name to return: ")
    try:
        manager.return_book(student_id, key)
    except LentRecordNotFoundError:
        console.say("Lent book record not found!", _RED)
        return
    console.say("Book returned successfully!", _GREEN)


def _view_lent(console: _Console, manager: LibraryManager) -> None:
    console.clear()
    header, rule, *_ = format_lent_table([]).splitlines()
    console.say(header)
    console.say(rule)
    for lent in manager.lent_books:
        console.say(_lent_row(lent), _BLUE if lent.is_returned() else _RED)


_LIBRARY_ACTIONS: dict[int, Callable[[_Console, LibraryManager], None]] = {
    1: _view_books,
    2: _view_details,
    3: _add_book,
    4: _delete_book,
    5: _edit_amount,
    6: _lend_book,
    7: _return_book,
    8: _view_lent,
}
_LOGOUT = 9


def _library_menu(console: _Console, manager: LibraryManager) -> None:
    while True:
        console.clear()
        console.say("\nLibrary Menu", _BLUE)
        console.say("1. View Book List")
        console.say("2. Search Book & View Details")
        console.say("3. Add Book")
        console.say("4. Delete Book")
        console.say("5. Edit Book Amount")
        console.say("6. Lend Book")
        console.say("7. Return Book")
        console.say("8. View Lent Books")
        console.say("9. Logout")
        choice = console.integer("Enter choice: ")
        action = _LIBRARY_ACTIONS.get(choice)
        if action is not None:
            action(console, manager)
        elif choice == _LOGOUT:
            console.say("Logging out...")
        else:
            console.say("Invalid choice!")
        console.pause()
        if choice == _LOGOUT:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive library menu."""
    parser = argparse.ArgumentParser(description="Manage a small lending library.")
    parser.add_argument(
        "--data-dir",
        default=".",
        help="directory holding users.txt, books.txt and lent_books.txt",
    )
    args = parser.parse_args(argv)

    manager = LibraryManager(LibraryStore(args.data_dir))
    manager.load()
    console = _Console(sys.stdin, sys.stdout)

    try:
        while True:
            console.clear()
            console.say("Library Management System")
            console.say("1. Register", _BLUE)
            console.say("2. Login", _BLUE)
            console.say("3. Exit", _BLUE)
            choice = console.integer("Enter choice: ")
            if choice == 1:
                _register(console, manager)
            elif choice == 2:
                if _login(console, manager):
                    _library_menu(console, manager)
            elif choice == 3:
                console.say("Exiting the system......")
                return 0
            else:
                console.say("Invalid choice. Try again.", _RED)
    except EOFError:
        console.say("")
        return 0


if __name__ == "__main__":
    sys.exit(main())