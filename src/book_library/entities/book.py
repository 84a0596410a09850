"""Book domain entities."""

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class Book:
    """Domain entity for a single book record.

    Attributes:
        id: Unique identifier, assigned by the repository and never changed
        title: Book title
        author: Author name
        year_of_release: Year the book was published
        isbn: ISBN code
        is_borrowed: Whether the book is currently lent out
    """

    id: int
    title: str
    author: str
    year_of_release: int | None
    isbn: str
    is_borrowed: bool = False


@dataclass(frozen=True)
class BookCreate:
    """Data required to create a book. The repository assigns id and is_borrowed."""

    title: str
    author: str
    isbn: str
    year_of_release: int | None = None


@dataclass(frozen=True)
class BookUpdate:
    """Partial update for a book.

    Each field is None when absent from the update. id and is_borrowed have
    no field here, so an update cannot change them.
    """

    title: str | None = None
    author: str | None = None
    year_of_release: int | None = None
    isbn: str | None = None

    def present_fields(self) -> dict[str, Any]:
        """Return the fields that were supplied, keyed by attribute name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
