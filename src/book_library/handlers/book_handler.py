"""HTTP handlers for book operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like parsing string parameters, status codes
and error responses.
"""

from fastapi import HTTPException, status

from book_library.dto import (
    BookListResponse,
    BookResponse,
    CreateBookRequest,
    HealthCheckResponse,
    UpdateBookRequest,
)
from book_library.entities import BookFilters
from book_library.services import BookService
from book_library.utils import parse_leading_int


def parse_positive_int(value: str | None) -> int | None:
    """Parse the leading integer of a string and require it to be >= 1.

    Returns:
        The integer, or None if the value is missing, not an integer or below 1
    """
    number = parse_leading_int(value)
    if number is None:
        return None
    return number if number >= 1 else None


def parse_borrowed_flag(value: str | None) -> bool | None:
    """Interpret the isBorrowed query parameter.

    "true" in any case means borrowed, any other value means not borrowed.
    """
    if value is None:
        return None
    return value.lower() == "true"


class BookHandler:
    """HTTP handlers for book operations.

    This handler delegates business logic to BookService
    and handles HTTP-specific concerns like:
    - Parsing and validating path and query strings
    - Converting entities to DTOs
    - Setting appropriate status codes

    Example:
        ```python
        handler = BookHandler(book_service=BookService(repository=repo))

        @app.get("/books/{book_id}", response_model=BookResponse)
        async def get_book(book_id: str):
            return await handler.get_book(book_id)
        ```
    """

    def __init__(self, book_service: BookService) -> None:
        """Initialize the book handler.

        Args:
            book_service: The book service for business logic (required).
        """
        self._books = book_service

    async def list_books(
        self,
        page: str | None = None,
        size: str | None = None,
        title: str | None = None,
        author: str | None = None,
        year: str | None = None,
        is_borrowed: str | None = None,
    ) -> BookListResponse:
        """Handle GET /books requests.

        Raises:
            HTTPException: 400 if page or size is not a positive integer
        """
        page_number = parse_positive_int(page or "1")
        if page_number is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=(
                    "Invalid 'page' number provided. Must be a positive integer "
                    f"(e.g., 1, 2, 3...). Received: {page}"
                ),
            )

        page_size = parse_positive_int(size or str(self._books.default_page_size))
        if page_size is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=(
                    "Invalid 'size' (page size) provided. Must be a positive integer "
                    f"(e.g., 1, 10, 50...). Received: {size}"
                ),
            )

        filters = BookFilters(
            title=title,
            author=author,
            year=year,
            is_borrowed=parse_borrowed_flag(is_borrowed),
        )
        result = self._books.list_books(filters, page=page_number, page_size=page_size)
        return BookListResponse.from_entity(result)

    async def get_book(self, book_id: str) -> BookResponse:
        """Handle GET /books/{id} requests.

        Raises:
            HTTPException: 400 for an invalid id, 404 if the book does not exist
        """
        numeric_id = self._validate_id(book_id)
        book = self._books.get_book(numeric_id)
        if book is None:
            raise self._not_found(book_id)
        return BookResponse.from_entity(book)

    async def create_book(self, request: CreateBookRequest) -> BookResponse:
        """Handle POST /books requests.

        Raises:
            HTTPException: 400 if title, author or isbn is missing or empty
        """
        if not request.has_required_fields():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Missing required fields: title, author, and isbn are mandatory.",
            )
        book = self._books.create_book(request.to_entity())
        return BookResponse.from_entity(book)

    async def update_book(self, book_id: str, request: UpdateBookRequest) -> BookResponse:
        """Handle PUT /books/{id} requests.

        Raises:
            HTTPException: 400 for an invalid id or an empty body,
                404 if the book does not exist
        """
        numeric_id = self._validate_id(book_id)

        if not request.has_keys():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No update data provided.",
            )

        changes = request.to_entity()
        book = self._books.update_book(numeric_id, changes)
        if book is None:
            raise self._not_found(book_id)
        return BookResponse.from_entity(book)

    async def delete_book(self, book_id: str) -> None:
        """Handle DELETE /books/{id} requests.

        Raises:
            HTTPException: 400 for an invalid id, 404 if the book does not exist
        """
        numeric_id = self._validate_id(book_id)
        if not self._books.delete_book(numeric_id):
            raise self._not_found(book_id)

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        return HealthCheckResponse(status="healthy", total_books=self._books.count())

    @staticmethod
    def _validate_id(book_id: str) -> int:
        numeric_id = parse_positive_int(book_id)
        if numeric_id is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid Book ID provided: {book_id}. Must be a positive integer.",
            )
        return numeric_id

    @staticmethod
    def _not_found(book_id: str) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book with ID {book_id} not found",
        )
