"""
Tests for domain value objects and exceptions.
"""

import pytest

from bookstore.domain.exceptions import (
    DuplicateBookError,
    ReferenceNotFoundError,
    StorageConflictError,
    ValidationFailedError,
)
from bookstore.domain.value_objects import (
    BookCreationResult,
    BookListQuery,
    BookSortKey,
    CreateBookCommand,
    CreationFailure,
    Genre,
)


class TestGenre:
    """Tests for the Genre enumeration."""

    def test_from_label(self):
        assert Genre.from_label("ScienceFiction") is Genre.SCIENCE_FICTION
        assert Genre.from_label(" Drama ") is Genre.DRAMA

    def test_from_member_name(self):
        assert Genre.from_label("science_fiction") is Genre.SCIENCE_FICTION

    def test_unknown_label_raises(self):
        with pytest.raises(ValueError, match="Unknown genre"):
            Genre.from_label("Cooking")

    def test_value_is_label(self):
        assert Genre.SCIENCE_FICTION.value == "ScienceFiction"


class TestBookListQuery:
    """Tests for the BookListQuery value object."""

    def test_defaults(self):
        query = BookListQuery()

        assert query.author is None
        assert query.sort_by is BookSortKey.ID
        assert query.has_author_filter() is False

    def test_blank_author_is_no_filter(self):
        assert BookListQuery(author="   ").has_author_filter() is False

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("title", BookSortKey.TITLE),
            ("TITLE", BookSortKey.TITLE),
            (" Year ", BookSortKey.YEAR),
            ("id", BookSortKey.ID),
            ("rating", BookSortKey.ID),
            ("", BookSortKey.ID),
            (None, BookSortKey.ID),
        ],
    )
    def test_from_raw_sort_key(self, raw, expected):
        assert BookListQuery.from_raw(sort_by=raw).sort_by is expected

    def test_from_raw_keeps_author(self):
        assert BookListQuery.from_raw(author="King").author == "King"

    def test_query_immutability(self):
        query = BookListQuery(author="King")

        with pytest.raises(Exception):  # FrozenInstanceError
            query.author = "Asimov"


class TestCreateBookCommand:
    def test_defaults(self):
        command = CreateBookCommand(title="Foundation", publication_year=1951)

        assert command.isbn is None
        assert command.illustrator_id == 0
        assert command.author_ids == []
        assert command.genres == []


class TestBookCreationResult:
    """Tests for the BookCreationResult value object."""

    def test_succeeded(self):
        result = BookCreationResult.succeeded(42)

        assert result.success is True
        assert result.book_id == 42
        assert result.errors == []
        assert result.failure is None

    def test_failed(self):
        result = BookCreationResult.failed(CreationFailure.DUPLICATE_BOOK, ["This book already exists."])

        assert result.success is False
        assert result.book_id is None
        assert result.errors == ["This book already exists."]
        assert result.failure is CreationFailure.DUPLICATE_BOOK

    def test_failure_requires_errors(self):
        with pytest.raises(ValueError, match="errors are required"):
            BookCreationResult(success=False, failure=CreationFailure.VALIDATION_FAILED)

    def test_success_requires_id(self):
        with pytest.raises(ValueError, match="book_id is required"):
            BookCreationResult(success=True)


class TestCreationErrors:
    """Each exception carries its failure category and messages."""

    @pytest.mark.parametrize(
        "error_cls, failure",
        [
            (ReferenceNotFoundError, CreationFailure.REFERENCE_NOT_FOUND),
            (ValidationFailedError, CreationFailure.VALIDATION_FAILED),
            (DuplicateBookError, CreationFailure.DUPLICATE_BOOK),
            (StorageConflictError, CreationFailure.STORAGE_CONFLICT),
        ],
    )
    def test_failure_category(self, error_cls, failure):
        error = error_cls(["message"])

        assert error.failure is failure
        assert error.errors == ["message"]

    def test_storage_conflict_default_message(self):
        error = StorageConflictError()

        assert error.errors == ["Database error (possible duplicate ISBN)."]
        assert isinstance(error, ValueError)

    def test_empty_messages_rejected(self):
        with pytest.raises(ValueError):
            DuplicateBookError([])
