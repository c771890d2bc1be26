"""
Domain exceptions for book creation.

Each expected failure of the creation flow has its own exception type.
They are raised inside the creation service and recovered at its boundary,
where they become a BookCreationResult instead of escaping to the caller.
"""

from typing import List, Optional

from .value_objects import CreationFailure


class BookCreationError(Exception):
    """Base class for expected failures while creating a book."""

    failure: CreationFailure = CreationFailure.VALIDATION_FAILED

    def __init__(self, errors: List[str]) -> None:
        if not errors:
            raise ValueError("A creation error needs at least one message")
        super().__init__("; ".join(errors))
        self.errors = list(errors)


class ReferenceNotFoundError(BookCreationError):
    """A referenced author or illustrator does not exist."""

    failure = CreationFailure.REFERENCE_NOT_FOUND


class ValidationFailedError(BookCreationError):
    """The candidate book breaks one or more domain rules."""

    failure = CreationFailure.VALIDATION_FAILED


class DuplicateBookError(BookCreationError):
    """A book with the same title, year and author set already exists."""

    failure = CreationFailure.DUPLICATE_BOOK


class StorageConflictError(BookCreationError, ValueError):
    """
    The storage layer rejected a write because of a uniqueness constraint.

    Raised by repositories (ISBN collision), not by application-level
    duplicate detection.
    """

    failure = CreationFailure.STORAGE_CONFLICT

    def __init__(self, errors: Optional[List[str]] = None) -> None:
        super().__init__(errors or ["Database error (possible duplicate ISBN)."])
