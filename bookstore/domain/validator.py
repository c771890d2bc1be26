"""
Domain validation rules for books.

The validator is a pure function: the current year is passed in by the
caller instead of being read from the system clock.
"""

from typing import List, Optional

from .entities import Book

MIN_PUBLICATION_YEAR = 1450
ISBN_REQUIRED_FROM_YEAR = 1970
ISBN_LENGTH = 13

FUTURE_YEAR_MESSAGE = "Publication year cannot be in the future."
TOO_OLD_MESSAGE = f"Books cannot be written before {MIN_PUBLICATION_YEAR}."
TITLE_MANDATORY_MESSAGE = "Title is mandatory."
ILLUSTRATOR_MANDATORY_MESSAGE = "Illustrator is mandatory."
ISBN_FORMAT_MESSAGE = (
    f"For books published after {ISBN_REQUIRED_FROM_YEAR}, "
    f"ISBN must be exactly {ISBN_LENGTH} digits."
)


def is_valid_isbn13(isbn: Optional[str]) -> bool:
    """
    Check the ISBN shape: exactly 13 ASCII digits.

    The ISBN-13 checksum is not verified.
    """
    if isbn is None or not isbn.strip():
        return False
    return len(isbn) == ISBN_LENGTH and isbn.isascii() and isbn.isdigit()


def validate_book(book: Book, current_year: int) -> List[str]:
    """
    Collect every domain rule the candidate book violates.

    Rules are evaluated independently; an empty list means the book is valid.

    Args:
        book: Candidate book (not yet persisted)
        current_year: Calendar year used as upper bound for publication_year

    Returns:
        Ordered list of human-readable violation messages
    """
    errors: List[str] = []

    if book.publication_year > current_year:
        errors.append(FUTURE_YEAR_MESSAGE)

    if book.publication_year < MIN_PUBLICATION_YEAR:
        errors.append(TOO_OLD_MESSAGE)

    if not book.title or not book.title.strip():
        errors.append(TITLE_MANDATORY_MESSAGE)

    if book.illustrator_id <= 0:
        errors.append(ILLUSTRATOR_MANDATORY_MESSAGE)

    if book.publication_year >= ISBN_REQUIRED_FROM_YEAR and not is_valid_isbn13(book.isbn):
        errors.append(ISBN_FORMAT_MESSAGE)

    return errors
