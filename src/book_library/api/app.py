from typing import Any

from fastapi import FastAPI, Query, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from book_library.api.dependencies import HandlerDep, lifespan
from book_library.config import settings
from book_library.dto import (
    BookListResponse,
    BookResponse,
    CreateBookRequest,
    ErrorResponse,
    HealthCheckResponse,
    UpdateBookRequest,
)
from book_library.protocols import BookStore

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    404: {"model": ErrorResponse, "description": "Book not found"},
}


async def http_error_handler(request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {"error": message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request, exc: RequestValidationError) -> JSONResponse:
    """Render body and parameter validation failures as 400 {"error": message}."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def create_app(repository: BookStore | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        repository: Book store to serve. If None, the lifespan builds one
            from settings (seeded with the sample catalogue by default).

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Book Library API",
        description="In-memory book catalogue with filtering and pagination",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.repository = repository

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Book Library API",
            "version": "0.1.0",
            "description": "In-memory book catalogue with filtering and pagination",
            "endpoints": {
                "books": "/books",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    @app.get("/books", response_model=BookListResponse, responses=ERROR_RESPONSES)
    async def list_books(
        handler: HandlerDep,
        page: str | None = Query(None, description="1-indexed page number"),
        size: str | None = Query(None, description="Books per page"),
        title: str | None = Query(None, description="Case-insensitive title substring"),
        author: str | None = Query(None, description="Case-insensitive author substring"),
        year: str | None = Query(None, description="Exact release year"),
        is_borrowed: str | None = Query(None, alias="isBorrowed", description="'true' or 'false'"),
    ) -> BookListResponse:
        """List books with optional filters and pagination."""
        return await handler.list_books(
            page=page,
            size=size,
            title=title,
            author=author,
            year=year,
            is_borrowed=is_borrowed,
        )

    @app.get("/books/{book_id}", response_model=BookResponse, responses=ERROR_RESPONSES)
    async def get_book(book_id: str, handler: HandlerDep) -> BookResponse:
        """Get a single book by id."""
        return await handler.get_book(book_id)

    @app.post(
        "/books",
        response_model=BookResponse,
        status_code=status.HTTP_201_CREATED,
        responses=ERROR_RESPONSES,
    )
    async def create_book(request: CreateBookRequest, handler: HandlerDep) -> BookResponse:
        """Create a book. title, author and isbn are required."""
        return await handler.create_book(request)

    @app.put("/books/{book_id}", response_model=BookResponse, responses=ERROR_RESPONSES)
    async def update_book(
        book_id: str,
        request: UpdateBookRequest,
        handler: HandlerDep,
    ) -> BookResponse:
        """Update title, author, yearOfRelease or isbn of a book."""
        return await handler.update_book(book_id, request)

    @app.delete(
        "/books/{book_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        responses=ERROR_RESPONSES,
    )
    async def delete_book(book_id: str, handler: HandlerDep) -> Response:
        """Delete a book."""
        await handler.delete_book(book_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "book_library.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
