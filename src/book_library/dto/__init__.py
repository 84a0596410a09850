"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract (camelCase JSON).
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import CreateBookRequest, UpdateBookRequest
from .responses import (
    BookListResponse,
    BookResponse,
    ErrorResponse,
    HealthCheckResponse,
    PaginationResponse,
)

__all__ = [
    "CreateBookRequest",
    "UpdateBookRequest",
    "BookResponse",
    "PaginationResponse",
    "BookListResponse",
    "ErrorResponse",
    "HealthCheckResponse",
]
