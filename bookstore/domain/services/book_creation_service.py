"""
Domain service for creating books.

The creation flow runs these steps in order, each one stopping the flow
on failure:

    1. Author existence      -> ReferenceNotFoundError
    2. Illustrator existence -> ReferenceNotFoundError
    3. Domain validation     -> ValidationFailedError (all violations)
    4. Duplicate detection   -> DuplicateBookError
    5. Persistence           -> StorageConflictError (raised by the repository)

Expected failures are recovered at the service boundary and returned as a
BookCreationResult. Any other error raised by the repository propagates.
"""

import logging
from datetime import date
from typing import Optional

from bookstore.domain.entities import Book
from bookstore.domain.exceptions import (
    BookCreationError,
    DuplicateBookError,
    ReferenceNotFoundError,
    ValidationFailedError,
)
from bookstore.domain.ports import BookCatalogRepository, Clock
from bookstore.domain.validator import validate_book
from bookstore.domain.value_objects import BookCreationResult, CreateBookCommand

logger = logging.getLogger(__name__)

AUTHORS_NOT_FOUND_MESSAGE = "One or more authors not found."
ILLUSTRATOR_NOT_FOUND_MESSAGE = "Illustrator not found."
DUPLICATE_BOOK_MESSAGE = "This book already exists."


def current_calendar_year() -> int:
    """Default clock: the current year from the system date."""
    return date.today().year


class BookCreationService:
    """
    Orchestrates the creation of a book in the catalog.

    The service depends only on the catalog repository port and a clock,
    so it can be exercised with fake repositories and a fixed year.

    Usage:
        service = BookCreationService(catalog_repo=sqlite_repo)
        result = service.create_book(command)
        if result.success:
            print(result.book_id)
    """

    def __init__(
        self,
        catalog_repo: BookCatalogRepository,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        Initialize the creation service.

        Args:
            catalog_repo: Repository for authors, illustrators and books
            clock: Callable returning the current year (defaults to system date)
        """
        self._catalog_repo = catalog_repo
        self._clock = clock or current_calendar_year

    def create_book(self, command: CreateBookCommand) -> BookCreationResult:
        """
        Create a book, or explain why it cannot be created.

        Args:
            command: Title, year, ISBN, illustrator id, author ids and genres

        Returns:
            BookCreationResult with the new id, or the failure category and
            its messages
        """
        try:
            book_id = self._create(command)
        except BookCreationError as e:
            logger.warning(
                f"Rejected book '{command.title}' ({command.publication_year}): "
                f"{e.failure.value} - {e.errors}"
            )
            return BookCreationResult.failed(e.failure, e.errors)

        logger.info(f"Created book id={book_id} title='{command.title}'")
        return BookCreationResult.succeeded(book_id)

    def _create(self, command: CreateBookCommand) -> int:
        # Step 1: every requested author must exist
        authors = self._catalog_repo.get_authors_by_ids(list(command.author_ids))
        if len(authors) != len(command.author_ids):
            raise ReferenceNotFoundError([AUTHORS_NOT_FOUND_MESSAGE])

        # Step 2: the illustrator must exist
        if not self._catalog_repo.illustrator_exists(command.illustrator_id):
            raise ReferenceNotFoundError([ILLUSTRATOR_NOT_FOUND_MESSAGE])

        # Step 3: domain rules
        book = Book(
            title=command.title,
            publication_year=command.publication_year,
            isbn=command.isbn,
            illustrator_id=command.illustrator_id,
            author_ids=[author.id for author in authors],
            genres=list(command.genres),
        )
        violations = validate_book(book, self._clock())
        if violations:
            raise ValidationFailedError(violations)

        # Step 4: same title + year + author set means duplicate
        candidates = self._catalog_repo.find_by_title_and_year(
            book.title, book.publication_year
        )
        for candidate in candidates:
            if candidate.has_same_authors(command.author_ids):
                raise DuplicateBookError([DUPLICATE_BOOK_MESSAGE])

        # Step 5: persist (StorageConflictError comes from the repository)
        return self._catalog_repo.add_book(book)
