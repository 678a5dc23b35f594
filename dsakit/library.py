"""A small lending library with an interactive text menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

MENU = (
    "\nLibrary Management System\n"
    "1. Add Book\n"
    "2. Display Books\n"
    "3. Borrow Book\n"
    "4. Return Book\n"
    "5. Exit\n"
    "Enter your choice: "
)


class BookNotFoundError(LookupError):
    """Raised when no book carries the requested id."""

    def __init__(self, book_id: int) -> None:
        super().__init__(f"no book with id {book_id}")
        self.book_id = book_id


@dataclass
class Book:
    """A book held by the library."""

    book_id: int
    title: str
    author: str
    is_borrowed: bool = False

    @property
    def status(self) -> str:
        return "Borrowed" if self.is_borrowed else "Available"


class Library:
    """An ordered collection of books that can be lent out and returned."""

    def __init__(self) -> None:
        self._books: list[Book] = []

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def _find(self, book_id: int) -> Book | None:
        return next((book for book in self._books if book.book_id == book_id), None)

    def add_book(self, book: Book) -> None:
        """Append a book to the collection."""
        self._books.append(book)

    def remove_book(self, book_id: int) -> Book:
        """Remove and return the first book with this id."""
        book = self._find(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        self._books.remove(book)
        return book

    def borrow_book(self, book_id: int) -> bool:
        """Mark a book as borrowed.

        Returns False when the book does not exist or is already borrowed.
        """
        book = self._find(book_id)
        if book is None or book.is_borrowed:
            return False
        book.is_borrowed = True
        return True

    def return_book(self, book_id: int) -> bool:
        """Mark a borrowed book as returned.

        Returns False when the book does not exist or was not borrowed.
        """
        book = self._find(book_id)
        if book is None or not book.is_borrowed:
            return False
        book.is_borrowed = False
        return True

    def format_table(self) -> str:
        """Return a tab-separated listing of every book with its status."""
        lines = ["ID\tTitle\t\tAuthor\t\tStatus"]
        lines.extend(
            f"{book.book_id}\t{book.title}\t\t{book.author}\t\t{book.status}"
            for book in self._books
        )
        return "\n".join(lines) + "\n"


class _EndOfInput(Exception):
    pass


def run(library: Library, infile: TextIO, outfile: TextIO) -> None:
    """Drive the menu, reading answers from infile, until Exit or end of input."""

    def ask(prompt: str) -> str:
        outfile.write(prompt)
        line = infile.readline()
        if not line:
            raise _EndOfInput
        return line.rstrip("\r\n")

    def ask_id(prompt: str) -> int | None:
        try:
            return int(ask(prompt).strip())
        except ValueError:
            outfile.write("Invalid book ID.\n")
            return None

    try:
        while True:
            try:
                choice = int(ask(MENU).strip())
            except ValueError:
                choice = 0
            if choice == 1:
                book_id = ask_id("Enter Book ID: ")
                if book_id is None:
                    continue
                title = ask("Enter Book Title: ")
                author = ask("Enter Book Author: ")
                library.add_book(Book(book_id, title, author))
                outfile.write("Book added successfully!\n")
            elif choice == 2:
                outfile.write("\n" + library.format_table())
            elif choice == 3:
                book_id = ask_id("Enter Book ID to borrow: ")
                if book_id is None:
                    continue
                if library.borrow_book(book_id):
                    outfile.write("Book borrowed successfully!\n")
                else:
                    outfile.write("Book is either not available or does not exist!\n")
            elif choice == 4:
                book_id = ask_id("Enter Book ID to return: ")
                if book_id is None:
                    continue
                if library.return_book(book_id):
                    outfile.write("Book returned successfully!\n")
                else:
                    outfile.write("Book was not borrowed or does not exist!\n")
            elif choice == 5:
                outfile.write("Exiting system. Goodbye!\n")
                return
            else:
                outfile.write("Invalid choice. Please try again.\n")
    except _EndOfInput:
        return


def main(argv: list[str] | None = None) -> int:
    """Run the interactive library menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Library management system")
    parser.parse_args(argv)
    run(Library(), sys.stdin, sys.stdout)
    return 0