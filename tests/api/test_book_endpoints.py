"""
Tests for the v1 books API.

The FastAPI dependencies are overridden so each test runs against its own
temporary SQLite database and a fixed clock.
"""

import pytest
from fastapi.testclient import TestClient

from bookstore.api.v1.dependencies import (
    get_catalog_repository,
    get_creation_service,
    get_listing_service,
    reset_dependencies,
)
from bookstore.domain.services import BookCreationService, BookListingService
from bookstore.infrastructure.db.sqlite_book_catalog_repository import SqliteBookCatalogRepository
from bookstore.main import app

CURRENT_YEAR = 2026


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def repo(tmp_path):
    repo = SqliteBookCatalogRepository(tmp_path / "api_bookstore.db")
    repo.seed_defaults()
    return repo


@pytest.fixture
def client(repo):
    """TestClient wired to the temporary repository."""
    app.dependency_overrides[get_catalog_repository] = lambda: repo
    app.dependency_overrides[get_creation_service] = lambda: BookCreationService(
        catalog_repo=repo, clock=lambda: CURRENT_YEAR
    )
    app.dependency_overrides[get_listing_service] = lambda: BookListingService(catalog_repo=repo)

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    reset_dependencies()


def book_payload(**overrides) -> dict:
    payload = {
        "title": "Integration Test Book",
        "publication_year": 2024,
        "isbn": "9780132350884",
        "illustrator_id": 1,
        "author_ids": [1],
        "genres": ["ScienceFiction"],
    }
    payload.update(overrides)
    return payload


# ============================================================================
# CREATE TESTS
# ============================================================================

class TestCreateBook:
    def test_valid_book_returns_201(self, client):
        response = client.post("/api/v1/books", json=book_payload())

        assert response.status_code == 201
        assert response.json() == {"id": 1}

    def test_camel_case_body_accepted(self, client):
        payload = {
            "title": "Camel Case",
            "publicationYear": 2024,
            "isbn": "9780132350891",
            "illustratorId": 2,
            "authorIds": [2, 3],
            "genres": ["Drama"],
        }

        response = client.post("/api/v1/books", json=payload)

        assert response.status_code == 201

    def test_duplicate_returns_400(self, client):
        client.post("/api/v1/books", json=book_payload())

        response = client.post("/api/v1/books", json=book_payload(isbn="9780000000001", genres=[]))

        assert response.status_code == 400
        assert response.json() == {"errors": ["This book already exists."]}

    def test_same_isbn_returns_storage_conflict(self, client):
        client.post("/api/v1/books", json=book_payload())

        response = client.post("/api/v1/books", json=book_payload(title="Different Title"))

        assert response.status_code == 400
        assert response.json() == {"errors": ["Database error (possible duplicate ISBN)."]}

    def test_short_isbn_returns_400(self, client):
        response = client.post("/api/v1/books", json=book_payload(publication_year=1980, isbn="123"))

        assert response.status_code == 400
        assert "For books published after 1970, ISBN must be exactly 13 digits." in response.json()["errors"]

    def test_unknown_author_returns_400(self, client):
        response = client.post("/api/v1/books", json=book_payload(author_ids=[1, 99]))

        assert response.status_code == 400
        assert response.json() == {"errors": ["One or more authors not found."]}

    def test_unknown_illustrator_returns_400(self, client):
        response = client.post("/api/v1/books", json=book_payload(illustrator_id=99))

        assert response.status_code == 400
        assert response.json() == {"errors": ["Illustrator not found."]}

    def test_author_id_beyond_integer_range_returns_400(self, client):
        response = client.post("/api/v1/books", json=book_payload(author_ids=[2 ** 63]))

        assert response.status_code == 400
        assert response.json() == {"errors": ["One or more authors not found."]}

    def test_illustrator_id_beyond_integer_range_returns_400(self, client):
        response = client.post("/api/v1/books", json=book_payload(illustrator_id=2 ** 63))

        assert response.status_code == 400
        assert response.json() == {"errors": ["Illustrator not found."]}

    def test_unknown_genre_returns_400(self, client):
        response = client.post("/api/v1/books", json=book_payload(genres=["Cooking"]))

        assert response.status_code == 400
        assert response.json()["errors"]

    def test_missing_field_returns_400(self, client):
        payload = book_payload()
        del payload["title"]

        response = client.post("/api/v1/books", json=payload)

        assert response.status_code == 400
        assert any("title" in error for error in response.json()["errors"])


# ============================================================================
# LIST TESTS
# ============================================================================

class TestListBooks:
    def test_empty_catalog(self, client):
        response = client.get("/api/v1/books")

        assert response.status_code == 200
        assert response.json() == []

    def test_created_book_round_trip(self, client):
        """A created book appears once in the listing with its projection."""
        created = client.post("/api/v1/books", json=book_payload(author_ids=[2, 1])).json()

        listing = client.get("/api/v1/books").json()

        assert listing == [
            {
                "id": created["id"],
                "title": "Integration Test Book",
                "year": 2024,
                "isbn": "9780132350884",
                "illustrator_name": "Gustave Doré",
                "authors": ["Stephen King", "Isaac Asimov"],
                "genres": ["ScienceFiction"],
            }
        ]

    def test_filter_and_sort(self, client):
        client.post("/api/v1/books", json=book_payload(title="Zeta", publication_year=2001,
                                                       isbn="9780000000001", author_ids=[1]))
        client.post("/api/v1/books", json=book_payload(title="Alpha", publication_year=2010,
                                                       isbn="9780000000002", author_ids=[1, 2]))
        client.post("/api/v1/books", json=book_payload(title="Mid", publication_year=1999,
                                                       isbn="9780000000003", author_ids=[3]))

        by_title = client.get("/api/v1/books", params={"author": "King", "sort_by": "title"}).json()
        by_year = client.get("/api/v1/books", params={"author": "King", "sort_by": "year"}).json()

        assert [b["title"] for b in by_title] == ["Alpha", "Zeta"]
        assert [b["title"] for b in by_year] == ["Zeta", "Alpha"]

    def test_unknown_sort_falls_back_to_id(self, client):
        client.post("/api/v1/books", json=book_payload(title="B", isbn="9780000000001"))
        client.post("/api/v1/books", json=book_payload(title="A", isbn="9780000000002"))

        listing = client.get("/api/v1/books", params={"sort_by": "rating"}).json()

        assert [b["title"] for b in listing] == ["B", "A"]


# ============================================================================
# HEALTH / ERRORS
# ============================================================================

class TestHealthAndErrors:
    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "books": 0}

    def test_health_schema_is_documented(self, client):
        schema = client.get("/openapi.json").json()["components"]["schemas"]["HealthResponse"]

        assert schema["description"] == "Response body of GET /health."
        assert all(field.get("description") for field in schema["properties"].values())

    def test_unexpected_error_returns_500_without_detail(self, client):
        class BrokenListingService:
            def list_books(self, query=None):
                raise RuntimeError("Database error: disk image is malformed")

        app.dependency_overrides[get_listing_service] = lambda: BrokenListingService()

        response = client.get("/api/v1/books")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
        assert "malformed" not in response.text
