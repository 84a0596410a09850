"""In-memory implementation of BookStore.

Books live in a plain list in insertion order. Every query is a linear
scan; there is no indexing and no locking.
"""

import math
from collections.abc import Iterable
from dataclasses import replace

from book_library.entities import Book, BookCreate, BookFilters, BookPage, BookUpdate, PaginationInfo
from book_library.utils import parse_leading_int

from .sample_books import SAMPLE_BOOKS


class InMemoryBookRepository:
    """List-backed book repository.

    This class satisfies the BookStore protocol through structural
    typing - no explicit inheritance needed.

    Ids are assigned from a counter that starts one above the largest id
    among the initial books, so new ids never collide with seeded ones.
    """

    def __init__(self, books: Iterable[Book] | None = None) -> None:
        """Initialize the repository.

        Args:
            books: Initial books, kept in the given order.
        """
        self._books: list[Book] = list(books or [])
        self._next_id = max((b.id for b in self._books), default=0) + 1

    @classmethod
    def create_seeded(cls, books: Iterable[Book] | None = None) -> "InMemoryBookRepository":
        """Factory method to create a repository preloaded with the sample catalogue.

        Args:
            books: Books to preload. If None, uses SAMPLE_BOOKS.

        Returns:
            Configured InMemoryBookRepository
        """
        return cls(books=SAMPLE_BOOKS if books is None else books)

    def create(self, data: BookCreate) -> Book:
        book = Book(
            id=self._next_id,
            title=data.title,
            author=data.author,
            year_of_release=data.year_of_release,
            isbn=data.isbn,
            is_borrowed=False,
        )
        self._next_id += 1
        self._books.append(book)
        return book

    def get_by_id(self, book_id: int | str) -> Book | None:
        book_id = parse_leading_int(book_id)
        if book_id is None:
            return None

        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def update(self, book_id: int, changes: BookUpdate) -> Book | None:
        """Merge the supplied fields into an existing book.

        Empty values (``""``, ``0``) count as "no change", same as absent
        fields. id and is_borrowed are never touched.
        """
        for index, book in enumerate(self._books):
            if book.id == book_id:
                break
        else:
            return None

        merged = {name: value for name, value in changes.present_fields().items() if value}
        updated = replace(book, **merged)
        self._books[index] = updated
        return updated

    def delete(self, book_id: int) -> bool:
        initial_length = len(self._books)
        self._books = [b for b in self._books if b.id != book_id]
        return len(self._books) < initial_length

    def query(self, filters: BookFilters, page: int, page_size: int) -> BookPage:
        """Filter books, then slice out the requested page.

        Filters apply in order title, author, year, is_borrowed; each is
        skipped when unset. Pages past the end come back empty with the
        metadata still filled in.
        """
        books = list(self._books)

        if filters.title:
            title = filters.title.lower()
            books = [b for b in books if title in b.title.lower()]

        if filters.author:
            author = filters.author.lower()
            books = [b for b in books if author in b.author.lower()]

        if filters.year:
            year = str(filters.year)
            books = [
                b for b in books if b.year_of_release is not None and str(b.year_of_release) == year
            ]

        if filters.is_borrowed is not None:
            books = [b for b in books if b.is_borrowed == filters.is_borrowed]

        total_items = len(books)
        start = (page - 1) * page_size

        return BookPage(
            books=books[start : start + page_size],
            pagination=PaginationInfo(
                total_items=total_items,
                total_pages=math.ceil(total_items / page_size),
                current_page=page,
                page_size=page_size,
            ),
        )

    def count(self) -> int:
        return len(self._books)
