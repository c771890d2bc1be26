#!/usr/bin/env python3
"""
Catalog Seeding Script.

Creates the catalog schema, inserts the default authors and illustrators,
and optionally adds extra people given on the command line.

Usage:
    python -m scripts.seed_catalog --db-path data/bookstore.db
    python -m scripts.seed_catalog --author "Ursula Le Guin" --illustrator "Moebius Giraud"
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from bookstore.infrastructure.db.sqlite_book_catalog_repository import SqliteBookCatalogRepository

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "data/bookstore.db"


def split_full_name(full_name: str) -> Tuple[str, str]:
    """
    Split "First Last" into its first and last name.

    Everything after the first word is treated as the last name.

    Raises:
        ValueError: If fewer than two words are given
    """
    parts = full_name.split()
    if len(parts) < 2:
        raise ValueError(f"Expected 'First Last', got '{full_name}'")
    return parts[0], " ".join(parts[1:])


def main(
    db_path: str = DEFAULT_DB_PATH,
    authors: Optional[List[str]] = None,
    illustrators: Optional[List[str]] = None,
    seed_defaults: bool = True,
) -> SqliteBookCatalogRepository:
    """
    Main entry point for the seeding script.

    Args:
        db_path: Path to SQLite database
        authors: Extra author full names to add
        illustrators: Extra illustrator full names to add
        seed_defaults: Whether to insert the default authors and illustrators

    Returns:
        The repository bound to the seeded database
    """
    logger.info(f"Seeding catalog at {db_path}")
    catalog_repo = SqliteBookCatalogRepository(Path(db_path))

    if seed_defaults:
        catalog_repo.seed_defaults()

    for full_name in authors or []:
        first, last = split_full_name(full_name)
        author = catalog_repo.add_author(first, last)
        logger.info(f"  - Added author #{author.id}: {author.full_name}")

    for full_name in illustrators or []:
        first, last = split_full_name(full_name)
        illustrator = catalog_repo.add_illustrator(first, last)
        logger.info(f"  - Added illustrator #{illustrator.id}: {illustrator.full_name}")

    logger.info(f"Catalog ready ({catalog_repo.count_books()} books)")
    return catalog_repo


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create and seed the bookstore catalog")
    parser.add_argument(
        "--db-path",
        type=str,
        default=DEFAULT_DB_PATH,
        help=f"Path to SQLite database (default: {DEFAULT_DB_PATH})",
    )
    parser.add_argument(
        "--author", "-a",
        action="append",
        default=[],
        help="Extra author as 'First Last' (repeatable)",
    )
    parser.add_argument(
        "--illustrator", "-i",
        action="append",
        default=[],
        help="Extra illustrator as 'First Last' (repeatable)",
    )
    parser.add_argument(
        "--no-defaults",
        action="store_true",
        help="Do not insert the default authors and illustrators",
    )

    args = parser.parse_args()

    try:
        main(
            db_path=args.db_path,
            authors=args.author,
            illustrators=args.illustrator,
            seed_defaults=not args.no_defaults,
        )
    except ValueError as e:
        parser.error(str(e))
    except Exception as e:
        logger.error(f"Seeding failed: {e}", exc_info=True)
        sys.exit(1)
