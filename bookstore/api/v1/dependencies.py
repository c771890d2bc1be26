"""
FastAPI dependencies for dependency injection.

This module provides singleton instances of the repository and services
for use with FastAPI's Depends() system. Configuration comes from the
environment.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from bookstore.domain.ports import BookCatalogRepository
from bookstore.domain.services import BookCreationService, BookListingService
from bookstore.infrastructure.db.sqlite_book_catalog_repository import SqliteBookCatalogRepository

logger = logging.getLogger(__name__)

# Configuration from environment
DB_PATH = Path(os.getenv("BOOKSTORE_DB_PATH", "data/bookstore.db"))
SEED_DEFAULTS = os.getenv("BOOKSTORE_SEED_DEFAULTS", "1").strip().lower() in {"1", "true", "yes", "on"}

# Module-level singletons (initialized lazily)
_catalog_repository: Optional[BookCatalogRepository] = None
_creation_service: Optional[BookCreationService] = None
_listing_service: Optional[BookListingService] = None


def get_catalog_repository() -> BookCatalogRepository:
    """Provide a singleton instance of the catalog repository."""
    global _catalog_repository
    if _catalog_repository is None:
        logger.info(f"Opening catalog database at {DB_PATH}")
        repo = SqliteBookCatalogRepository(DB_PATH)
        if SEED_DEFAULTS:
            repo.seed_defaults()
        _catalog_repository = repo
    return _catalog_repository


def get_creation_service() -> BookCreationService:
    """Provide the book creation service wired to the repository."""
    global _creation_service
    if _creation_service is None:
        _creation_service = BookCreationService(catalog_repo=get_catalog_repository())
    return _creation_service


def get_listing_service() -> BookListingService:
    """Provide the book listing service wired to the repository."""
    global _listing_service
    if _listing_service is None:
        _listing_service = BookListingService(catalog_repo=get_catalog_repository())
    return _listing_service


def reset_dependencies() -> None:
    """
    Reset all singletons. Useful for testing.

    This allows tests to inject mock dependencies by resetting
    the module state between test cases.
    """
    global _catalog_repository, _creation_service, _listing_service

    _catalog_repository = None
    _creation_service = None
    _listing_service = None
