"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - The book repository is created once per application, in the lifespan
    - Repository, service and handler are stored in app.state
    - Dependency functions retrieve them from request.app.state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from book_library.config import configure_logging, settings
from book_library.handlers import BookHandler
from book_library.repositories import InMemoryBookRepository
from book_library.services import BookService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> BookHandler:
    """Dependency injection for BookHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The BookHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "book_handler", None)
    if handler is None:
        raise RuntimeError("BookHandler not initialized. Check lifespan setup.")
    return handler


def build_repository() -> InMemoryBookRepository:
    """Create the repository the settings ask for: seeded or empty."""
    if settings.seed_sample_books:
        return InMemoryBookRepository.create_seeded()
    return InMemoryBookRepository()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores them in app.state:
    1. Repository (data access) - taken from app.state.repository if a
       caller injected one, otherwise built from settings
    2. Service (business logic) - stored in app.state.book_service
    3. Handler (HTTP endpoints) - stored in app.state.book_handler

    Cleanup:
        Removes service and handler from app.state on shutdown. The
        repository stays so a restarted app keeps its books.
    """
    configure_logging()

    repository = getattr(app.state, "repository", None)
    if repository is None:
        repository = build_repository()

    book_service = BookService.create(repository=repository)
    book_handler = BookHandler(book_service=book_service)

    app.state.repository = repository
    app.state.book_service = book_service
    app.state.book_handler = book_handler

    logger.info("Book service initialized with %d books", book_service.count())
    logger.info("Default page size: %d", book_service.default_page_size)

    yield

    del app.state.book_handler
    del app.state.book_service
    logger.info("Book service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[BookHandler, Depends(get_handler)]