"""Query and pagination entities."""

from dataclasses import dataclass, field

from .book import Book


@dataclass(frozen=True)
class BookFilters:
    """Optional filters for a book query.

    Attributes:
        title: Case-insensitive substring of the title
        author: Case-insensitive substring of the author
        year: Release year, compared as a string
        is_borrowed: Exact borrowed status
    """

    title: str | None = None
    author: str | None = None
    year: str | int | None = None
    is_borrowed: bool | None = None


@dataclass(frozen=True)
class PaginationInfo:
    """Pagination metadata returned alongside a page of books."""

    total_items: int
    total_pages: int
    current_page: int
    page_size: int


@dataclass(frozen=True)
class BookPage:
    """One page of a filtered book query."""

    pagination: PaginationInfo
    books: list[Book] = field(default_factory=list)
