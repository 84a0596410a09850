"""Book storage protocol.

Defines the interface for any backend that can hold book records and
answer filtered, paginated queries over them.
"""

from typing import Protocol, runtime_checkable

from book_library.entities import Book, BookCreate, BookFilters, BookPage, BookUpdate


@runtime_checkable
class BookStore(Protocol):
    """Protocol for book storage backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    def create(self, data: BookCreate) -> Book:
        """Store a new book.

        Args:
            data: Book fields supplied by the caller

        Returns:
            The stored book with its assigned id
        """
        ...

    def get_by_id(self, book_id: int | str) -> Book | None:
        """Find a book by id.

        Args:
            book_id: Integer id or its decimal string form

        Returns:
            The book, or None if missing or the id does not parse
        """
        ...

    def update(self, book_id: int, changes: BookUpdate) -> Book | None:
        """Merge changes into an existing book.

        Args:
            book_id: The id of the book to update
            changes: Fields to change

        Returns:
            The updated book, or None if not found
        """
        ...

    def delete(self, book_id: int) -> bool:
        """Delete a book by id.

        Args:
            book_id: The id of the book to delete

        Returns:
            True if deleted, False otherwise
        """
        ...

    def query(self, filters: BookFilters, page: int, page_size: int) -> BookPage:
        """Filter and paginate books.

        Args:
            filters: Optional filters to apply
            page: 1-indexed page number
            page_size: Number of books per page

        Returns:
            The requested page with pagination metadata
        """
        ...

    def count(self) -> int:
        """Count total books in the store.

        Returns:
            Total number of stored books
        """
        ...
