"""Response DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from book_library.entities import Book, BookPage


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookResponse(_CamelModel):
    """Single book as returned by the API."""

    id: int = Field(..., description="Unique book id", ge=1)
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Author name")
    year_of_release: int | None = Field(None, description="Year the book was published")
    isbn: str = Field(..., description="ISBN code")
    is_borrowed: bool = Field(..., description="Whether the book is currently lent out")

    @classmethod
    def from_entity(cls, book: Book) -> "BookResponse":
        return cls(
            id=book.id,
            title=book.title,
            author=book.author,
            year_of_release=book.year_of_release,
            isbn=book.isbn,
            is_borrowed=book.is_borrowed,
        )


class PaginationResponse(_CamelModel):
    """Pagination metadata for a book list."""

    total_items: int = Field(..., description="Books matching the filters", ge=0)
    total_pages: int = Field(..., description="Pages available at this page size", ge=0)
    current_page: int = Field(..., description="The requested page", ge=1)
    page_size: int = Field(..., description="Books per page", ge=1)


class BookListResponse(_CamelModel):
    """Response DTO for a filtered, paginated book list."""

    books: list[BookResponse] = Field(default_factory=list, description="Books on this page")
    pagination: PaginationResponse

    @classmethod
    def from_entity(cls, page: BookPage) -> "BookListResponse":
        return cls(
            books=[BookResponse.from_entity(b) for b in page.books],
            pagination=PaginationResponse(
                total_items=page.pagination.total_items,
                total_pages=page.pagination.total_pages,
                current_page=page.pagination.current_page,
                page_size=page.pagination.page_size,
            ),
        )


class ErrorResponse(BaseModel):
    """Body of every 4xx response."""

    error: str = Field(..., description="Human-readable error message")


class HealthCheckResponse(_CamelModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy'")
    total_books: int = Field(..., description="Number of books in the store", ge=0)
