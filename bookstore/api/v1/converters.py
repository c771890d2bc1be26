"""
Converters between domain value objects and API schemas.

This module centralizes all conversion logic between the domain layer
and the API layer.
"""

from dataclasses import asdict

from bookstore.domain import value_objects as domain_vo
from bookstore.api.v1 import schemas as api


def api_request_to_domain(request: api.CreateBookRequest) -> domain_vo.CreateBookCommand:
    """
    Convert an API CreateBookRequest to a domain CreateBookCommand.

    Args:
        request: API request body

    Returns:
        Domain command for the creation service
    """
    return domain_vo.CreateBookCommand(
        title=request.title,
        publication_year=request.publication_year,
        isbn=request.isbn,
        illustrator_id=request.illustrator_id,
        author_ids=list(request.author_ids),
        genres=list(request.genres),
    )


def domain_summary_to_api(summary: domain_vo.BookSummary) -> api.BookSummary:
    """
    Convert a domain BookSummary to an API BookSummary model.

    Args:
        summary: Domain summary projection

    Returns:
        API BookSummary model
    """
    return api.BookSummary(**asdict(summary))


def domain_failure_to_api(result: domain_vo.BookCreationResult) -> api.ErrorResponse:
    """Convert a failed creation result to the 400 response body."""
    return api.ErrorResponse(errors=list(result.errors))
