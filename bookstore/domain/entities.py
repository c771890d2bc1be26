"""
Domain entities for the bookstore catalog.

Entities are objects with a unique identity that runs through time and
different representations. Identities are integers assigned by storage.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .value_objects import Genre


@dataclass(frozen=True)
class Author:
    """
    A person who wrote one or more books.

    Authors are created out of band and never mutated by book creation.
    """

    id: int
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Illustrator:
    """The illustrator owning a book. Every book has exactly one."""

    id: int
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass
class Book:
    """
    Represents a book in the catalog.

    The entity does not enforce domain rules on construction: a candidate
    book is built first and then checked by the domain validator, so that
    all violations can be reported together.
    """

    title: str
    """Book title"""

    publication_year: int
    """Year of publication"""

    illustrator_id: int
    """Identifier of the owning illustrator"""

    isbn: Optional[str] = None
    """ISBN-13 (required from 1970 on)"""

    author_ids: List[int] = field(default_factory=list)
    """Identifiers of the associated authors"""

    genres: List[Genre] = field(default_factory=list)
    """Genre tags in insertion order"""

    id: Optional[int] = None
    """Identity assigned by storage, None until persisted"""

    def __eq__(self, other: object) -> bool:
        """Persisted books are equal when they share an id."""
        if not isinstance(other, Book):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)

    def sorted_author_ids(self) -> List[int]:
        """Author ids in ascending order, for order-independent comparison."""
        return sorted(self.author_ids)

    def has_same_authors(self, author_ids: List[int]) -> bool:
        """Check if this book has exactly the given author set."""
        return self.sorted_author_ids() == sorted(author_ids)
