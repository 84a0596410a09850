"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from book_library.repositories import InMemoryBookRepository
    from book_library.services import BookService

    books = BookService.create(repository=InMemoryBookRepository.create_seeded())
    ```
"""

from .book_service import BookService

__all__ = [
    "BookService",
]
