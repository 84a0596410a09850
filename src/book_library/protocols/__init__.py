"""Protocol interfaces for swappable implementations.

Protocols enable:
- Swapping the in-memory store for a database-backed one
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from book_library.protocols import BookStore

    repo: BookStore = InMemoryBookRepository()
    ```
"""

from .book_store import BookStore

__all__ = [
    "BookStore",
]
