"""
Tests for the in-memory book repository.
"""

import pytest

from book_library.entities import Book, BookCreate, BookFilters, BookUpdate
from book_library.protocols import BookStore
from book_library.repositories import SAMPLE_BOOKS, InMemoryBookRepository


@pytest.fixture
def repo():
    """Create a repository with three known books."""
    return InMemoryBookRepository(
        books=[
            Book(5, "The Hobbit", "J.R.R. Tolkien", 1937, "isbn-5", False),
            Book(9, "Dune", "Frank Herbert", 1965, "isbn-9", True),
            Book(7, "The Two Towers", "J.R.R. Tolkien", 1954, "isbn-7", False),
        ]
    )


def test_satisfies_protocol(repo):
    assert isinstance(repo, BookStore)


def test_create_assigns_id_above_existing_max(repo):
    book = repo.create(BookCreate(title="Emma", author="Jane Austen", isbn="isbn-emma"))
    assert book.id == 10
    assert book.is_borrowed is False
    assert repo.get_by_id(10) == book


def test_create_ids_are_unique_and_increasing(repo):
    ids = [repo.create(BookCreate(title=f"T{i}", author="A", isbn="I")).id for i in range(3)]
    assert ids == [10, 11, 12]


def test_create_on_empty_repository_starts_at_one():
    repo = InMemoryBookRepository()
    assert repo.create(BookCreate(title="T", author="A", isbn="I")).id == 1


def test_ids_not_reused_after_delete(repo):
    created = repo.create(BookCreate(title="T", author="A", isbn="I"))
    assert repo.delete(created.id)
    assert repo.create(BookCreate(title="T", author="A", isbn="I")).id == created.id + 1


def test_create_seeded_continues_after_sample_ids():
    repo = InMemoryBookRepository.create_seeded()
    assert repo.count() == len(SAMPLE_BOOKS)
    assert repo.create(BookCreate(title="T", author="A", isbn="I")).id == 121


@pytest.mark.parametrize("book_id", [9, "9", " 9 ", "9abc", "9.5", "9_0", "+9"])
def test_get_by_id_accepts_int_or_numeric_string(repo, book_id):
    assert repo.get_by_id(book_id).title == "Dune"


@pytest.mark.parametrize("book_id", ["abc", "", None, 42, 9.5, "\u0669", "-9"])
def test_get_by_id_missing(repo, book_id):
    assert repo.get_by_id(book_id) is None


def test_update_changes_only_given_fields(repo):
    updated = repo.update(5, BookUpdate(title="There and Back Again"))
    assert updated == Book(5, "There and Back Again", "J.R.R. Tolkien", 1937, "isbn-5", False)
    assert repo.get_by_id(5) == updated


def test_update_treats_empty_values_as_no_change(repo):
    updated = repo.update(9, BookUpdate(title="", author="", year_of_release=0, isbn=""))
    assert updated == Book(9, "Dune", "Frank Herbert", 1965, "isbn-9", True)


def test_update_keeps_position(repo):
    repo.update(9, BookUpdate(author="F. Herbert"))
    assert [b.id for b in repo.query(BookFilters(), 1, 10).books] == [5, 9, 7]


def test_update_missing_book(repo):
    assert repo.update(42, BookUpdate(title="X")) is None


def test_delete_removes_exactly_one(repo):
    assert repo.delete(9) is True
    assert repo.count() == 2
    assert repo.get_by_id(9) is None


def test_delete_missing_book(repo):
    assert repo.delete(42) is False
    assert repo.count() == 3


def test_query_without_filters_keeps_insertion_order(repo):
    page = repo.query(BookFilters(), page=1, page_size=10)
    assert [b.id for b in page.books] == [5, 9, 7]
    assert page.pagination.total_items == 3
    assert page.pagination.total_pages == 1


def test_query_title_and_author_are_case_insensitive(repo):
    assert [b.id for b in repo.query(BookFilters(title="HOBBIT"), 1, 10).books] == [5]
    assert [b.id for b in repo.query(BookFilters(author="tolkien"), 1, 10).books] == [5, 7]


def test_query_year_compares_as_string(repo):
    assert [b.id for b in repo.query(BookFilters(year="1965"), 1, 10).books] == [9]
    assert [b.id for b in repo.query(BookFilters(year=1965), 1, 10).books] == [9]
    assert repo.query(BookFilters(year="196"), 1, 10).books == []


def test_query_borrowed_status(repo):
    assert [b.id for b in repo.query(BookFilters(is_borrowed=True), 1, 10).books] == [9]
    assert [b.id for b in repo.query(BookFilters(is_borrowed=False), 1, 10).books] == [5, 7]


def test_query_filters_combine(repo):
    page = repo.query(BookFilters(author="tolkien", year="1954", is_borrowed=False), 1, 10)
    assert [b.id for b in page.books] == [7]


def test_query_empty_string_filters_are_ignored(repo):
    page = repo.query(BookFilters(title="", author="", year=""), 1, 10)
    assert page.pagination.total_items == 3


@pytest.mark.parametrize(
    "page_size, expected_pages",
    [(1, 3), (2, 2), (3, 1), (4, 1)],
)
def test_query_total_pages(repo, page_size, expected_pages):
    assert repo.query(BookFilters(), 1, page_size).pagination.total_pages == expected_pages


def test_query_slices_requested_page(repo):
    page = repo.query(BookFilters(), page=2, page_size=2)
    assert [b.id for b in page.books] == [7]
    assert page.pagination.current_page == 2
    assert page.pagination.page_size == 2


def test_query_page_out_of_range(repo):
    page = repo.query(BookFilters(), page=5, page_size=2)
    assert page.books == []
    assert page.pagination.total_items == 3
    assert page.pagination.total_pages == 2


def test_query_no_matches():
    page = InMemoryBookRepository().query(BookFilters(title="x"), 1, 10)
    assert page.books == []
    assert page.pagination.total_items == 0
    assert page.pagination.total_pages == 0


def test_query_year_skips_books_without_year(repo):
    repo.create(BookCreate(title="Untitled", author="Anon", isbn="I"))
    assert repo.query(BookFilters(year="None"), 1, 10).books == []
    assert repo.query(BookFilters(author="anon"), 1, 10).pagination.total_items == 1
