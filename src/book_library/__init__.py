"""Book Library - in-memory book catalogue served over HTTP.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (BookStore)
    - repositories: Data access implementations (in-memory)
    - services: Business logic
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from book_library.repositories import InMemoryBookRepository
    from book_library.services import BookService

    books = BookService.create(repository=InMemoryBookRepository.create_seeded())
    ```

For HTTP API:
    ```python
    from book_library.api.app import app, create_app
    ```
"""

from book_library.config import settings
from book_library.dto import CreateBookRequest, UpdateBookRequest
from book_library.entities import Book, BookCreate, BookFilters, BookPage, BookUpdate, PaginationInfo
from book_library.handlers import BookHandler
from book_library.protocols import BookStore
from book_library.repositories import InMemoryBookRepository
from book_library.services import BookService

__all__ = [
    # Configuration
    "settings",
    # Protocols (interfaces)
    "BookStore",
    # Services (business logic)
    "BookService",
    # Handlers (HTTP)
    "BookHandler",
    # Repositories (data access)
    "InMemoryBookRepository",
    # Entities (domain models)
    "Book",
    "BookCreate",
    "BookUpdate",
    "BookFilters",
    "BookPage",
    "PaginationInfo",
    # DTOs (API contracts)
    "CreateBookRequest",
    "UpdateBookRequest",
]
