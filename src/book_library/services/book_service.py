"""Book service for catalogue operations.

This service sits between the HTTP handlers and the BookStore. It owns
no state of its own beyond the store reference it was given.
"""

import logging

from book_library.config import settings
from book_library.entities import Book, BookCreate, BookFilters, BookPage, BookUpdate
from book_library.protocols import BookStore

logger = logging.getLogger(__name__)


class BookService:
    """Catalogue operations over a BookStore.

    Example:
        ```python
        service = BookService(repository=InMemoryBookRepository())
        book = service.create_book(BookCreate(title="Dune", author="Frank Herbert", isbn="978-0441172719"))
        page = service.list_books(BookFilters(author="herbert"), page=1)
        ```
    """

    def __init__(self, repository: BookStore, default_page_size: int | None = None) -> None:
        """Initialize the book service.

        Args:
            repository: Book storage backend (required).
            default_page_size: Page size used when the caller gives none. Defaults to settings.
        """
        self._repository = repository
        self._default_page_size = default_page_size or settings.default_page_size

    @classmethod
    def create(
        cls,
        repository: BookStore,
        default_page_size: int | None = None,
    ) -> "BookService":
        """Factory method to create BookService with settings defaults.

        Args:
            repository: Book storage backend (required).
            default_page_size: Page size override. If None, uses settings.

        Returns:
            Configured BookService instance
        """
        return cls(repository=repository, default_page_size=default_page_size)

    def list_books(
        self,
        filters: BookFilters,
        page: int = 1,
        page_size: int | None = None,
    ) -> BookPage:
        """Return one page of books matching the filters.

        Args:
            filters: Optional title/author/year/borrowed filters
            page: 1-indexed page number
            page_size: Books per page. Defaults to the configured page size.

        Returns:
            BookPage with the matching books and pagination metadata
        """
        result = self._repository.query(filters, page, page_size or self._default_page_size)
        logger.debug(
            "Query %s page=%d matched %d books",
            filters,
            page,
            result.pagination.total_items,
        )
        return result

    def get_book(self, book_id: int | str) -> Book | None:
        book = self._repository.get_by_id(book_id)
        if book is None:
            logger.debug("Book %s not found", book_id)
        return book

    def create_book(self, data: BookCreate) -> Book:
        book = self._repository.create(data)
        logger.info("Created book %d: %r by %s", book.id, book.title, book.author)
        return book

    def update_book(self, book_id: int, changes: BookUpdate) -> Book | None:
        """Apply a partial update to a book.

        Returns:
            The updated book, or None if no book has that id
        """
        book = self._repository.update(book_id, changes)
        if book is None:
            logger.debug("Update skipped, book %d not found", book_id)
            return None
        logger.info("Updated book %d (%s)", book_id, ", ".join(changes.present_fields()))
        return book

    def delete_book(self, book_id: int) -> bool:
        deleted = self._repository.delete(book_id)
        if deleted:
            logger.info("Deleted book %d", book_id)
        else:
            logger.debug("Delete skipped, book %d not found", book_id)
        return deleted

    def count(self) -> int:
        """Get the number of stored books."""
        return self._repository.count()

    @property
    def default_page_size(self) -> int:
        """Get the page size used when none is requested."""
        return self._default_page_size
