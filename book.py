from __future__ import annotations

from exceptions import ValidationError

REQUIRED_FIELDS_MESSAGE = "All fields (ISBN, title, author, publicationYear) are required"


def is_missing(value: object) -> bool:
    """True for None, empty strings and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


class Book:
    """Represents a single book item in the catalog.

    ISBN, title, author and publication year are fixed once the book exists;
    only ``borrowed`` changes afterwards, and the Library is what flips it.
    The ISBN may be a non-negative ``int`` or a ``str`` (stripped). Its length
    is the length of ``str(isbn)``, the digit count for an int, and lookups
    compare the value exactly.
    """

    def __init__(self, isbn: int | str, title: str, author: str, publication_year: int) -> None:
        if any(is_missing(v) for v in (isbn, title, author, publication_year)):
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)
        if isinstance(isbn, bool) or not isinstance(isbn, (int, str)):
            raise ValidationError("ISBN must be an int or a str")
        if isinstance(isbn, int) and isbn < 0:
            raise ValidationError("ISBN must not be negative")
        if not isinstance(title, str) or not isinstance(author, str):
            raise ValidationError("title and author must be text")
        if isinstance(publication_year, bool) or not isinstance(publication_year, int):
            raise ValidationError("publicationYear must be an integer")

        self._isbn = isbn.strip() if isinstance(isbn, str) else isbn
        self._title = title.strip()
        self._author = author.strip()
        self._publication_year = publication_year
        self.borrowed = False

    @property
    def isbn(self) -> int | str:
        return self._isbn

    @property
    def title(self) -> str:
        return self._title

    @property
    def author(self) -> str:
        return self._author

    @property
    def publication_year(self) -> int:
        return self._publication_year

    def __str__(self) -> str:
        return f"{self.title} by {self.author} (ISBN: {self.isbn})"

    def __repr__(self) -> str:
        return f"Book(isbn={self.isbn!r}, title={self.title!r}, borrowed={self.borrowed})"

    def to_dict(self) -> dict:
        return {
            "isbn": self.isbn,
            "title": self.title,
            "author": self.author,
            "publication_year": self.publication_year,
            "borrowed": self.borrowed,
        }
