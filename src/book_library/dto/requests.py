"""Request DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from book_library.entities import BookCreate, BookUpdate


class CreateBookRequest(BaseModel):
    """Request DTO for creating a book.

    Required fields are declared optional here so that the handler can
    answer a missing field with its own 400 message.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = Field(None, description="Book title (required)")
    author: str | None = Field(None, description="Author name (required)")
    year_of_release: int | None = Field(None, description="Year the book was published")
    isbn: str | None = Field(None, description="ISBN code (required)")

    def has_required_fields(self) -> bool:
        return bool(self.title and self.author and self.isbn)

    def to_entity(self) -> BookCreate:
        return BookCreate(
            title=self.title or "",
            author=self.author or "",
            isbn=self.isbn or "",
            year_of_release=self.year_of_release,
        )


class UpdateBookRequest(BaseModel):
    """Request DTO for a partial book update.

    Only the fields present in the request body end up in the update.
    Unknown keys (isBorrowed, id, ...) are kept as extras so the body counts
    as non-empty, but they never reach the update.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    title: str | None = Field(None, description="New title")
    author: str | None = Field(None, description="New author")
    year_of_release: int | None = Field(None, description="New release year")
    isbn: str | None = Field(None, description="New ISBN")

    def has_keys(self) -> bool:
        """Check whether the body carried any key at all, known or not."""
        return bool(self.model_fields_set or self.model_extra)

    def to_entity(self) -> BookUpdate:
        known = type(self).model_fields
        return BookUpdate(
            **{name: getattr(self, name) for name in self.model_fields_set if name in known}
        )
