"""
Domain services package.

Services orchestrate domain logic that doesn't naturally belong to a single
entity. They depend only on domain entities, value objects, and port
protocols (never on concrete implementations).
"""

from .book_creation_service import BookCreationService
from .book_listing_service import BookListingService

__all__ = [
    "BookCreationService",
    "BookListingService",
]
