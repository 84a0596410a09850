"""Repository layer for data access.

This layer holds the book storage implementations behind the BookStore
protocol. The repositories are protocol-based (structural typing), not
inheritance-based.
"""

from book_library.protocols import BookStore

from .memory_repository import InMemoryBookRepository
from .sample_books import SAMPLE_BOOKS

__all__ = [
    "BookStore",
    "InMemoryBookRepository",
    "SAMPLE_BOOKS",
]
