"""
Domain layer - Core business logic and entities.

This layer contains the business entities, value objects, the domain
validator, and defines the ports (interfaces) that the infrastructure
layer must implement.

It has NO dependencies on external frameworks or databases.
"""

from .entities import Author, Book, Illustrator
from .value_objects import (
    BookCreationResult,
    BookListQuery,
    BookSortKey,
    BookSummary,
    CreateBookCommand,
    CreationFailure,
    Genre,
)

__all__ = [
    # Entities
    "Author",
    "Book",
    "Illustrator",
    # Value Objects
    "BookCreationResult",
    "BookListQuery",
    "BookSortKey",
    "BookSummary",
    "CreateBookCommand",
    "CreationFailure",
    "Genre",
]
