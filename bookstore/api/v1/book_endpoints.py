"""
API endpoints for book operations.

This module defines the FastAPI routes for creating and listing books.
It handles HTTP concerns and delegates to domain services.
"""

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from bookstore.api.v1 import schemas as api
from bookstore.api.v1.converters import (
    api_request_to_domain,
    domain_failure_to_api,
    domain_summary_to_api,
)
from bookstore.api.v1.dependencies import (
    get_catalog_repository,
    get_creation_service,
    get_listing_service,
)
from bookstore.domain.ports import BookCatalogRepository
from bookstore.domain.services import BookCreationService, BookListingService
from bookstore.domain.value_objects import BookListQuery

router = APIRouter()


@router.post(
    "/books",
    status_code=status.HTTP_201_CREATED,
    response_model=api.CreateBookResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": api.ErrorResponse}},
)
def create_book(
    request: api.CreateBookRequest,
    service: BookCreationService = Depends(get_creation_service),
):
    """
    Create a new book.

    Returns 201 with the new id, or 400 with every reason the book was
    rejected (missing references, domain rule violations, duplicate,
    ISBN conflict).
    """
    result = service.create_book(api_request_to_domain(request))

    if not result.success:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=domain_failure_to_api(result).model_dump(),
        )

    return api.CreateBookResponse(id=result.book_id)


@router.get("/books", response_model=list[api.BookSummary])
def list_books(
    author: str | None = Query(default=None, description="Substring of an author's first or last name"),
    sort_by: str | None = Query(default=None, description="'title', 'year' or 'id' (default)"),
    service: BookListingService = Depends(get_listing_service),
) -> list[api.BookSummary]:
    """
    List books with optional author filtering and sorting.

    Args:
        author: Case-sensitive substring matched against author names
        sort_by: Sort key; unknown values fall back to ordering by id

    Returns:
        Summary of every matching book
    """
    query = BookListQuery.from_raw(author=author, sort_by=sort_by)
    return [domain_summary_to_api(s) for s in service.list_books(query)]


@router.get("/health", response_model=api.HealthResponse)
def health_check(
    catalog_repo: BookCatalogRepository = Depends(get_catalog_repository),
) -> api.HealthResponse:
    """Check that the catalog database answers."""
    return api.HealthResponse(status="ok", books=catalog_repo.count_books())
