import pytest

from book import Book
from exceptions import ValidationError


def test_new_book_is_not_borrowed():
    book = Book(9780262046305, "Introduction to Algorithms", "Thomas H. Cormen", 2022)
    assert book.borrowed is False
    assert book.isbn == 9780262046305
    assert book.publication_year == 2022


def test_title_and_author_are_stripped():
    book = Book("1234567890", "  Ulysses ", " James Joyce  ", 1922)
    assert book.title == "Ulysses"
    assert book.author == "James Joyce"


@pytest.mark.parametrize(
    "isbn, title, author, year",
    [
        (None, "Ulysses", "James Joyce", 1922),
        ("", "Ulysses", "James Joyce", 1922),
        (123456, "", "James Joyce", 1922),
        (123456, "   ", "James Joyce", 1922),
        (123456, "Ulysses", None, 1922),
        (123456, "Ulysses", "James Joyce", None),
    ],
)
def test_missing_fields_rejected(isbn, title, author, year):
    with pytest.raises(ValidationError, match="are required"):
        Book(isbn, title, author, year)


@pytest.mark.parametrize("isbn", [True, 123456.0, b"123456"])
def test_isbn_type_rejected(isbn):
    with pytest.raises(ValidationError, match="ISBN must be"):
        Book(isbn, "Ulysses", "James Joyce", 1922)


def test_negative_isbn_rejected():
    with pytest.raises(ValidationError, match="must not be negative"):
        Book(-123456, "Ulysses", "James Joyce", 1922)


def test_string_isbn_is_stripped():
    book = Book("  978-0199535675 ", "Ulysses", "James Joyce", 1922)
    assert book.isbn == "978-0199535675"


@pytest.mark.parametrize("year",["1922", 1922.0, True])
def test_publication_year_must_be_int(year):
    with pytest.raises(ValidationError, match="must be an integer"):
        Book(123456, "Ulysses", "James Joyce", year)


def test_title_must_be_text():
    with pytest.raises(ValidationError, match="must be text"):
        Book(123456, 42, "James Joyce", 1922)


def test_descriptive_fields_are_read_only():
    book = Book(123456, "Ulysses", "James Joyce", 1922)
    with pytest.raises(AttributeError):
        book.isbn = 654321
    with pytest.raises(AttributeError):
        book.title = "Dubliners"
    with pytest.raises(AttributeError):
        book.publication_year = 1914


def test_str_and_to_dict():
    book = Book(123456, "Ulysses", "James Joyce", 1922)
    assert str(book) == "Ulysses by James Joyce (ISBN: 123456)"
    assert book.to_dict() == {
        "isbn": 123456,
        "title": "Ulysses",
        "author": "James Joyce",
        "publication_year": 1922,
        "borrowed": False,
    }
