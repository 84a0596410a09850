"""Domain entities for internal representation.

These are pure dataclasses used internally by services and repositories.
They are NOT used for API contracts - use DTOs from the dto package for that.
"""

from .book import Book, BookCreate, BookUpdate
from .book_page import BookFilters, BookPage, PaginationInfo

__all__ = [
    "Book",
    "BookCreate",
    "BookUpdate",
    "BookFilters",
    "BookPage",
    "PaginationInfo",
]
