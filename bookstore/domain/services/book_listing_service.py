"""
Domain service for the book listing.
"""

import logging
from typing import List, Optional

from bookstore.domain.ports import BookCatalogRepository
from bookstore.domain.value_objects import BookListQuery, BookSummary

logger = logging.getLogger(__name__)


class BookListingService:
    """
    Read-only listing of the catalog.

    Filtering and ordering are pushed down to the repository; the service
    normalizes the query and reports what it returned.
    """

    def __init__(self, catalog_repo: BookCatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def list_books(self, query: Optional[BookListQuery] = None) -> List[BookSummary]:
        """
        List books matching an optional author filter, in the requested order.

        Args:
            query: Author filter and sort key (defaults to all books by id)

        Returns:
            Summary projection of every matching book
        """
        query = query or BookListQuery()
        if query.author is not None and not query.has_author_filter():
            query = BookListQuery(author=None, sort_by=query.sort_by)

        summaries = self._catalog_repo.list_summaries(query)
        logger.debug(
            f"Listed {len(summaries)} books (author={query.author!r}, sort_by={query.sort_by.value})"
        )
        return summaries
