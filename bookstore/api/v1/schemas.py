"""
Request and response bodies of the v1 books API.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bookstore.domain.value_objects import Genre


class CreateBookRequest(BaseModel):
    """
    Request body for POST /books.

    Accepts snake_case field names as well as their camelCase aliases
    (e.g. ``publicationYear``).
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(description="Book title")
    publication_year: int = Field(description="Year of publication")
    isbn: str | None = Field(default=None, description="ISBN-13, required from 1970 on")
    illustrator_id: int = Field(description="Identifier of the illustrator")
    author_ids: list[int] = Field(default_factory=list, description="Identifiers of the authors")
    genres: list[Genre] = Field(default_factory=list, description="Genre labels, e.g. 'ScienceFiction'")


class CreateBookResponse(BaseModel):
    """Response body of a successful creation (201)."""
    id: int = Field(description="Identifier of the new book")


class ErrorResponse(BaseModel):
    """Response body of a rejected creation (400)."""
    errors: list[str] = Field(description="Human-readable reasons for the rejection")


class BookSummary(BaseModel):
    """
    API representation of a book in the listing.

    Maps from the domain BookSummary projection.
    """

    id: int = Field(description="Book identifier")
    title: str = Field(description="Book title")
    year: int = Field(description="Year of publication")
    isbn: str | None = Field(default=None, description="ISBN-13 if known")
    illustrator_name: str = Field(description="Illustrator full name")
    authors: list[str] = Field(default_factory=list, description="Author full names")
    genres: list[str] = Field(default_factory=list, description="Genre labels")


class HealthResponse(BaseModel):
    """Response body of GET /health."""
    status: str = Field(description="'ok' when the catalog database answers")
    books: int = Field(description="Number of books in the catalog")
