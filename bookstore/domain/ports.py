"""
Port interfaces (protocols) for the domain layer.

Ports define the contracts between the domain and infrastructure layers.
They are implemented by adapters in the infrastructure layer, allowing
the domain to remain independent of technical details.
"""

from typing import Callable, List, Protocol

from .entities import Author, Book, Illustrator
from .value_objects import BookListQuery, BookSummary

Clock = Callable[[], int]
"""Returns the current calendar year."""


class BookCatalogRepository(Protocol):
    """
    Port for persisting and retrieving books, authors and illustrators.

    It abstracts away the persistence mechanism (SQLite, in-memory map, ...).

    Implementations should handle:
    - Unique constraint on non-null ISBN
    - Atomic insert of a book together with its author links and genres
    - Translating uniqueness violations into StorageConflictError
    """

    def get_authors_by_ids(self, author_ids: List[int]) -> List[Author]:
        """
        Retrieve the existing authors among the given ids.

        Args:
            author_ids: Requested author identifiers

        Returns:
            Distinct authors found; unknown ids are silently absent, so
            callers compare counts to detect missing references.
        """
        ...

    def illustrator_exists(self, illustrator_id: int) -> bool:
        """
        Check whether an illustrator with this id exists.

        Args:
            illustrator_id: Illustrator identifier

        Returns:
            True if the illustrator exists
        """
        ...

    def find_by_title_and_year(self, title: str, publication_year: int) -> List[Book]:
        """
        Retrieve books whose title and year match exactly.

        Title comparison is case-sensitive. Returned books carry their
        author ids so duplicates can be detected by author set.
        """
        ...

    def add_book(self, book: Book) -> int:
        """
        Insert a book with its author associations and genres as one unit.

        Args:
            book: The book to persist (its id is ignored)

        Returns:
            The identifier assigned to the new book

        Raises:
            StorageConflictError: If a uniqueness constraint is violated
            RuntimeError: If any other database error occurs
        """
        ...

    def list_summaries(self, query: BookListQuery) -> List[BookSummary]:
        """
        Return the summary projection of every book matching the query.

        Args:
            query: Author filter and sort key

        Returns:
            Summaries ordered by the query's sort key (ties broken by id)
        """
        ...

    def add_author(self, first_name: str, last_name: str) -> Author:
        """Create an author and return it with its assigned id."""
        ...

    def add_illustrator(self, first_name: str, last_name: str) -> Illustrator:
        """Create an illustrator and return it with its assigned id."""
        ...

    def count_books(self) -> int:
        """Get the total number of books in the catalog."""
        ...

    def seed_defaults(self) -> None:
        """Insert the default authors and illustrators if they are missing."""
        ...
