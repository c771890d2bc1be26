"""
SQLite implementation of the BookCatalogRepository port.

This adapter persists authors, illustrators and books to a SQLite database.
Book-author links live in a join table; genres are stored as a
comma-joined list of labels. A partial unique index enforces ISBN
uniqueness for books that have one.
"""

import logging
import sqlite3
import threading
from contextlib import contextmanager, nullcontext
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

from bookstore.domain.entities import Author, Book, Illustrator
from bookstore.domain.exceptions import StorageConflictError
from bookstore.domain.ports import BookCatalogRepository
from bookstore.domain.value_objects import BookListQuery, BookSortKey, BookSummary, Genre

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"
SQLITE_MIN_INTEGER = -(2 ** 63)
SQLITE_MAX_INTEGER = 2 ** 63 - 1
GENRE_SEPARATOR = ","

DEFAULT_AUTHORS: List[Tuple[int, str, str]] = [
    (1, "Stephen", "King"),
    (2, "Isaac", "Asimov"),
    (3, "Marguerite", "Duras"),
]

DEFAULT_ILLUSTRATORS: List[Tuple[int, str, str]] = [
    (1, "Gustave", "Doré"),
    (2, "Norman", "Rockwell"),
    (3, "Beya", "Rebaï"),
]

# Whitelist: sort keys never reach the SQL text as user input
_ORDER_BY: Dict[BookSortKey, str] = {
    BookSortKey.ID: "b.id",
    BookSortKey.TITLE: "b.title, b.id",
    BookSortKey.YEAR: "b.publication_year, b.id",
}

_AUTHOR_FILTER = """
    EXISTS (
        SELECT 1 FROM book_authors fba
        JOIN authors fa ON fa.id = fba.author_id
        WHERE fba.book_id = b.id
          AND (instr(fa.first_name, :author) > 0 OR instr(fa.last_name, :author) > 0)
    )
"""


def encode_genres(genres: List[Genre]) -> str:
    """Serialize genres as comma-joined labels (e.g. 'Action,Drama')."""
    return GENRE_SEPARATOR.join(Genre(g).value for g in genres)


def decode_genres(raw: Optional[str]) -> List[Genre]:
    """Parse comma-joined labels back into genres, dropping empty tokens."""
    if not raw:
        return []
    return [Genre.from_label(token) for token in raw.split(GENRE_SEPARATOR) if token.strip()]


def fits_sqlite_integer(value: int) -> bool:
    """SQLite stores integers as signed 64-bit; larger ids cannot name a row."""
    return SQLITE_MIN_INTEGER <= value <= SQLITE_MAX_INTEGER


class SqliteBookCatalogRepository(BookCatalogRepository):
    """
    The unique constraint on isbn is enforced only for non-null values, so
    books published before 1970 without an ISBN may coexist.

    Passing ":memory:" keeps a single shared connection alive for the
    lifetime of the repository (useful for tests). Access to that connection
    is serialized so each call keeps its own transaction.
    """

    def __init__(self, db_path: Union[Path, str]) -> None:
        """
        Initialize the repository with a database path
        """
        self._shared_conn: Optional[sqlite3.Connection] = None
        self._shared_lock = threading.Lock()
        if str(db_path) == MEMORY_DB:
            self._db_path = MEMORY_DB
            self._shared_conn = self._connect()
        else:
            path = Path(db_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._db_path = str(path)
        self._init_schema()

    def _connect(self) -> sqlite3.Connection:
        # Requests may be served from a worker thread pool
        conn = sqlite3.connect(self._db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    @contextmanager
    def _get_connection(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection; commit on success, roll back on error."""
        if self._shared_conn is not None:
            guard = self._shared_lock
        else:
            guard = nullcontext()

        with guard:
            conn = self._shared_conn or self._connect()
            try:
                yield conn
                conn.commit()
            except Exception:
                conn.rollback()
                raise
            finally:
                if conn is not self._shared_conn:
                    conn.close()

    def close(self) -> None:
        """Close the shared in-memory connection, if any."""
        if self._shared_conn is not None:
            self._shared_conn.close()
            self._shared_conn = None

    def _init_schema(self) -> None:
        """Create the tables and indexes if they don't exist."""
        with self._get_connection() as conn:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS authors (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    first_name TEXT NOT NULL,
                    last_name TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS illustrators (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    first_name TEXT NOT NULL,
                    last_name TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS books (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    publication_year INTEGER NOT NULL,
                    isbn TEXT,
                    illustrator_id INTEGER NOT NULL REFERENCES illustrators(id),
                    genres TEXT NOT NULL DEFAULT ''
                );

                CREATE TABLE IF NOT EXISTS book_authors (
                    book_id INTEGER NOT NULL REFERENCES books(id) ON DELETE CASCADE,
                    author_id INTEGER NOT NULL REFERENCES authors(id),
                    PRIMARY KEY (book_id, author_id)
                );

                CREATE UNIQUE INDEX IF NOT EXISTS ux_books_isbn
                    ON books(isbn) WHERE isbn IS NOT NULL;

                CREATE INDEX IF NOT EXISTS idx_books_title_year
                    ON books(title, publication_year);
            """)

    def seed_defaults(self) -> None:
        """Insert the default authors and illustrators (idempotent)."""
        with self._get_connection() as conn:
            conn.executemany(
                "INSERT OR IGNORE INTO authors (id, first_name, last_name) VALUES (?, ?, ?)",
                DEFAULT_AUTHORS,
            )
            conn.executemany(
                "INSERT OR IGNORE INTO illustrators (id, first_name, last_name) VALUES (?, ?, ?)",
                DEFAULT_ILLUSTRATORS,
            )
        logger.info("Default authors and illustrators seeded")

    def add_author(self, first_name: str, last_name: str) -> Author:
        with self._get_connection() as conn:
            cursor = conn.execute(
                "INSERT INTO authors (first_name, last_name) VALUES (?, ?)",
                (first_name, last_name),
            )
            return Author(id=cursor.lastrowid, first_name=first_name, last_name=last_name)

    def add_illustrator(self, first_name: str, last_name: str) -> Illustrator:
        with self._get_connection() as conn:
            cursor = conn.execute(
                "INSERT INTO illustrators (first_name, last_name) VALUES (?, ?)",
                (first_name, last_name),
            )
            return Illustrator(id=cursor.lastrowid, first_name=first_name, last_name=last_name)

    def count_books(self) -> int:
        """Get the total number of books in the catalog."""
        with self._get_connection() as conn:
            result = conn.execute("SELECT COUNT(*) AS cnt FROM books").fetchone()
            return result["cnt"]

    def get_authors_by_ids(self, author_ids: List[int]) -> List[Author]:
        """Retrieve the existing authors among the given ids."""
        if not author_ids:
            return []

        # Out-of-range ids cannot exist; dropping them yields a count mismatch
        unique_ids = sorted(i for i in set(author_ids) if fits_sqlite_integer(i))
        if not unique_ids:
            return []

        placeholders = ", ".join("?" * len(unique_ids))
        with self._get_connection() as conn:
            rows = conn.execute(
                f"SELECT id, first_name, last_name FROM authors WHERE id IN ({placeholders}) ORDER BY id",
                unique_ids,
            ).fetchall()

        return [
            Author(id=row["id"], first_name=row["first_name"], last_name=row["last_name"])
            for row in rows
        ]

    def illustrator_exists(self, illustrator_id: int) -> bool:
        if not fits_sqlite_integer(illustrator_id):
            return False
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT 1 FROM illustrators WHERE id = ?",
                (illustrator_id,),
            ).fetchone()
            return row is not None

    def find_by_title_and_year(self, title: str, publication_year: int) -> List[Book]:
        """Retrieve books with exactly this title (case-sensitive) and year."""
        with self._get_connection() as conn:
            rows = conn.execute(
                "SELECT * FROM books WHERE title = ? AND publication_year = ? ORDER BY id",
                (title, publication_year),
            ).fetchall()
            if not rows:
                return []

            book_ids = [row["id"] for row in rows]
            placeholders = ", ".join("?" * len(book_ids))
            links = conn.execute(
                f"SELECT book_id, author_id FROM book_authors "
                f"WHERE book_id IN ({placeholders}) ORDER BY author_id",
                book_ids,
            ).fetchall()

        author_ids: Dict[int, List[int]] = {book_id: [] for book_id in book_ids}
        for link in links:
            author_ids[link["book_id"]].append(link["author_id"])

        return [self._row_to_book(row, author_ids[row["id"]]) for row in rows]

    def _row_to_book(self, row: sqlite3.Row, author_ids: List[int]) -> Book:
        """Convert a database row to a Book entity."""
        return Book(
            id=row["id"],
            title=row["title"],
            publication_year=row["publication_year"],
            isbn=row["isbn"],
            illustrator_id=row["illustrator_id"],
            author_ids=author_ids,
            genres=decode_genres(row["genres"]),
        )

    def add_book(self, book: Book) -> int:
        """Insert a book, its author links and genres in one transaction."""
        isbn = book.isbn if book.isbn and book.isbn.strip() else None

        try:
            with self._get_connection() as conn:
                cursor = conn.execute(
                    """
                    INSERT INTO books (title, publication_year, isbn, illustrator_id, genres)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (
                        book.title,
                        book.publication_year,
                        isbn,
                        book.illustrator_id,
                        encode_genres(book.genres),
                    ),
                )
                book_id = cursor.lastrowid
                conn.executemany(
                    "INSERT INTO book_authors (book_id, author_id) VALUES (?, ?)",
                    [(book_id, author_id) for author_id in sorted(set(book.author_ids))],
                )
        except sqlite3.IntegrityError as e:
            logger.warning(f"Insert of '{book.title}' rejected by constraint: {e}")
            raise StorageConflictError() from e
        except sqlite3.Error as e:
            raise RuntimeError(f"Database error while saving book: {e}") from e

        logger.debug(f"Inserted book id={book_id} title='{book.title}'")
        return book_id

    def list_summaries(self, query: BookListQuery) -> List[BookSummary]:
        """Return the summary projection of every book matching the query."""
        params: Dict[str, str] = {}
        where = ""
        if query.has_author_filter():
            where = f"WHERE {_AUTHOR_FILTER}"
            params["author"] = query.author

        order_by = _ORDER_BY[query.sort_by]

        with self._get_connection() as conn:
            rows = conn.execute(
                f"""
                SELECT b.id, b.title, b.publication_year, b.isbn, b.genres,
                       i.first_name || ' ' || i.last_name AS illustrator_name
                FROM books b
                JOIN illustrators i ON i.id = b.illustrator_id
                {where}
                ORDER BY {order_by}
                """,
                params,
            ).fetchall()

            links = conn.execute(
                f"""
                SELECT ba.book_id, a.first_name || ' ' || a.last_name AS full_name
                FROM book_authors ba
                JOIN authors a ON a.id = ba.author_id
                WHERE ba.book_id IN (SELECT b.id FROM books b {where})
                ORDER BY ba.book_id, a.id
                """,
                params,
            ).fetchall()

        authors_by_book: Dict[int, List[str]] = {}
        for link in links:
            authors_by_book.setdefault(link["book_id"], []).append(link["full_name"])

        return [
            BookSummary(
                id=row["id"],
                title=row["title"],
                year=row["publication_year"],
                isbn=row["isbn"],
                illustrator_name=row["illustrator_name"],
                authors=authors_by_book.get(row["id"], []),
                genres=[genre.value for genre in decode_genres(row["genres"])],
            )
            for row in rows
        ]
