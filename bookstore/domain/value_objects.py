"""
Value objects for the domain layer.

Value objects are immutable objects that represent descriptive aspects
of the domain with no conceptual identity.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Genre(str, Enum):
    """Closed set of genre tags a book can carry."""

    ACTION = "Action"
    ADVENTURE = "Adventure"
    BIOGRAPHY = "Biography"
    COMEDY = "Comedy"
    DRAMA = "Drama"
    FANTASY = "Fantasy"
    HISTORY = "History"
    HORROR = "Horror"
    MYSTERY = "Mystery"
    POETRY = "Poetry"
    ROMANCE = "Romance"
    SCIENCE_FICTION = "ScienceFiction"
    THRILLER = "Thriller"

    @classmethod
    def from_label(cls, label: str) -> "Genre":
        """
        Parse a genre label, accepting either the label or the member name.

        Raises:
            ValueError: If the label is not a known genre
        """
        text = label.strip()
        for genre in cls:
            if text == genre.value or text.upper() == genre.name:
                return genre
        raise ValueError(f"Unknown genre '{label}'")


class BookSortKey(str, Enum):
    """Sort keys supported by the book listing."""

    ID = "id"
    TITLE = "title"
    YEAR = "year"


class CreationFailure(str, Enum):
    """Categories of expected book-creation failures."""

    REFERENCE_NOT_FOUND = "reference_not_found"
    VALIDATION_FAILED = "validation_failed"
    DUPLICATE_BOOK = "duplicate_book"
    STORAGE_CONFLICT = "storage_conflict"


@dataclass(frozen=True)
class CreateBookCommand:
    """
    Input of the book-creation use case.

    This is the domain-side counterpart of the HTTP request body.
    """

    title: str
    """Book title (validated, not trimmed)"""

    publication_year: int
    """Year the book was published"""

    isbn: Optional[str] = None
    """ISBN-13, mandatory from 1970 on"""

    illustrator_id: int = 0
    """Identifier of the illustrator owning the book"""

    author_ids: List[int] = field(default_factory=list)
    """Identifiers of the book's authors (order irrelevant)"""

    genres: List[Genre] = field(default_factory=list)
    """Genre tags, kept in the given order"""


@dataclass(frozen=True)
class BookListQuery:
    """
    Filter and ordering options for the book listing.

    A missing or blank author filter means "no restriction".
    """

    author: Optional[str] = None
    """Substring matched against first or last name of any author"""

    sort_by: BookSortKey = BookSortKey.ID
    """Ordering of the listing"""

    def has_author_filter(self) -> bool:
        """Check if an author filter is set."""
        return bool(self.author and self.author.strip())

    @staticmethod
    def from_raw(author: Optional[str] = None, sort_by: Optional[str] = None) -> "BookListQuery":
        """
        Build a query from loosely typed input (e.g. query-string values).

        The sort key is matched case-insensitively; anything unknown falls
        back to ordering by identity.
        """
        key = BookSortKey.ID
        if sort_by:
            try:
                key = BookSortKey(sort_by.strip().lower())
            except ValueError:
                key = BookSortKey.ID
        return BookListQuery(author=author, sort_by=key)


@dataclass(frozen=True)
class BookSummary:
    """Read-only, denormalized view of a book returned by the listing."""

    id: int
    title: str
    year: int
    isbn: Optional[str]
    illustrator_name: str
    authors: List[str] = field(default_factory=list)
    genres: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class BookCreationResult:
    """
    Outcome of a book-creation attempt.

    Either success with the new book id, or failure with a non-empty list
    of error messages and the failure category.
    """

    success: bool
    errors: List[str] = field(default_factory=list)
    book_id: Optional[int] = None
    failure: Optional[CreationFailure] = None

    def __post_init__(self) -> None:
        """Validate result consistency."""
        if self.success:
            if self.book_id is None:
                raise ValueError("book_id is required when success=True")
            if self.errors:
                raise ValueError("errors must be empty when success=True")
        else:
            if not self.errors:
                raise ValueError("errors are required when success=False")
            if self.failure is None:
                raise ValueError("failure is required when success=False")

    @staticmethod
    def succeeded(book_id: int) -> "BookCreationResult":
        return BookCreationResult(success=True, book_id=book_id)

    @staticmethod
    def failed(failure: CreationFailure, errors: List[str]) -> "BookCreationResult":
        return BookCreationResult(success=False, errors=list(errors), failure=failure)
