class LibraryError(Exception):
    """Base class for every failure raised by the catalog."""


class ValidationError(LibraryError):
    """Book data is missing or breaks an add rule."""


class NotFoundError(LibraryError):
    """No book with the requested ISBN is in the catalog."""


class ConflictError(LibraryError):
    """The book exists but is in the wrong state for the operation."""
