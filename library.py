import logging
from datetime import date
from typing import List, NoReturn, Optional, Union

from book import Book, REQUIRED_FIELDS_MESSAGE, is_missing
from config import settings
from exceptions import ConflictError, NotFoundError, ValidationError

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

MIN_ISBN_LENGTH = 6


class Library:
    """Manages the collection of books and their borrow status.

    Books are kept in insertion order. Nothing is ever removed; borrow and
    return only flip the ``borrowed`` flag of a stored record. Every failing
    call leaves the catalog untouched.
    """

    def __init__(self, current_year: Optional[int] = None) -> None:
        # None: LIBRARY_REFERENCE_YEAR if set, else the wall clock per call
        self._current_year = current_year
        self.books: List[Book] = []

    @property
    def current_year(self) -> int:
        if self._current_year is not None:
            return self._current_year
        if settings.reference_year is not None:
            return settings.reference_year
        return date.today().year

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Book) -> Book:
        """Validate and append a pre-constructed Book. Returns the stored book.

        Any object exposing the Book fields is accepted, so the required-field
        check runs here as well as in ``Book.__init__``.
        """
        if any(is_missing(v) for v in (book.isbn, book.title, book.author, book.publication_year)):
            self._reject(ValidationError(REQUIRED_FIELDS_MESSAGE), book.isbn)
        if self._isbn_length(book.isbn) < MIN_ISBN_LENGTH:
            self._reject(ValidationError("The ISBN number length should be greater than 5"), book.isbn)
        if book.publication_year > self.current_year:
            self._reject(ValidationError("Write the valid publication year in the past"), book.isbn)
        if self.find_book(book.isbn) is not None:
            self._reject(ValidationError("The same ISBN number book is already present"), book.isbn)

        self.books.append(book)
        logger.info(f"Book added: isbn={book.isbn} title={book.title!r}")
        return book

    def borrow_book(self, isbn: Union[int, str]) -> str:
        book = self._get_book(isbn)
        if book.borrowed:
            self._reject(ConflictError("Book is already borrowed"), isbn)
        book.borrowed = True
        logger.info(f"Book borrowed: isbn={isbn}")
        return "Book borrowed successfully"

    def return_book(self, isbn: Union[int, str]) -> str:
        book = self._get_book(isbn)
        if not book.borrowed:
            self._reject(ConflictError("Book was not borrowed"), isbn)
        book.borrowed = False
        logger.info(f"Book returned: isbn={isbn}")
        return "Book is return successfully"

    def show_available_books(self) -> List[Book]:
        """Snapshot of every book not currently borrowed, in insertion order."""
        available = [b for b in self.books if not b.borrowed]
        logger.debug(f"{len(available)}/{len(self.books)} books available")
        return available

    # ------------------------- Lookups ------------------------- #
    def list_books(self) -> List[Book]:
        return list(self.books)

    def find_book(self, isbn: Union[int, str]) -> Optional[Book]:
        for book in self.books:
            if type(book.isbn) is type(isbn) and book.isbn == isbn:
                return book
        return None

    # ------------------------- Utilities ------------------------- #
    def _get_book(self, isbn: Union[int, str]) -> Book:
        book = self.find_book(isbn)
        if book is None:
            self._reject(NotFoundError("Book not found"), isbn)
        return book

    @staticmethod
    def _isbn_length(isbn: Union[int, str]) -> int:
        # Digit count for ints
        if isinstance(isbn, int):
            return len(str(abs(isbn)))
        return len(isbn.strip())

    @staticmethod
    def _reject(error: Exception, isbn: object) -> NoReturn:
        logger.warning(f"Rejected (isbn={isbn}): {error}")
        raise error
