"""Database adapters."""

from .sqlite_book_catalog_repository import SqliteBookCatalogRepository

__all__ = ["SqliteBookCatalogRepository"]
