"""
==============================================================================
API Integration Tests
==============================================================================

Tests for REST API endpoints.

==============================================================================
"""

from fastapi.testclient import TestClient

from product_library.main import Application


BOOK_1984 = {
    "kind": "Book",
    "title": "1984",
    "author": "George Orwell",
    "genre": "Fiction",
    "price": 12.99,
}
BOOK_HOBBIT = {
    "kind": "Book",
    "title": "The Hobbit",
    "author": "J.R.R. Tolkien",
    "genre": "Fantasy",
    "price": 15.99,
}
JOURNAL_FIVE_MINUTE = {
    "kind": "Journal",
    "title": "Five-Minute Journal",
    "author": "Intelligent Change",
    "genre": "Life",
    "price": 3.99,
}


def add_all(client: TestClient, *products: dict) -> None:
    for product in products:
        response = client.post("/api/v1/products", json=product)
        assert response.status_code == 200


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client: TestClient):
        """Test health check returns status."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["components"]["catalog"] == "healthy"
        assert data["details"]["products_loaded"] == 0

    def test_readiness_probe(self, client: TestClient):
        """Test readiness probe."""
        response = client.get("/api/v1/health/ready")
        assert response.status_code == 200
        assert response.json()["ready"] is True

    def test_liveness_probe(self, client: TestClient):
        """Test liveness probe."""
        response = client.get("/api/v1/health/live")
        assert response.status_code == 200
        assert response.json()["alive"] is True

    def test_root(self, client: TestClient):
        """Test root endpoint describes the service."""
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["docs"] == "/docs"


class TestProductEndpoints:
    """Tests for catalog endpoints."""

    def test_empty_catalog(self, client: TestClient):
        """Test listing an empty catalog."""
        response = client.get("/api/v1/products")
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["total"] == 0
        assert data["products"] == []

    def test_add_product(self, client: TestClient):
        """Test adding a product with a description."""
        response = client.post(
            "/api/v1/products",
            json={**BOOK_1984, "description": "  Dystopia  "}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["total"] == 1
        assert data["product"] == {
            "kind": "Book",
            "title": "1984",
            "author": "George Orwell",
            "genre": "Fiction",
            "price": 12.99,
            "description": "Dystopia",
        }

    def test_add_product_defaults(self, client: TestClient):
        """Test price and description defaults."""
        response = client.post(
            "/api/v1/products",
            json={"kind": "Journal", "title": "Notes", "author": "Me", "genre": "Life"}
        )
        assert response.status_code == 200
        product = response.json()["product"]
        assert product["price"] == 0
        assert product["description"] == ""

    def test_add_invalid_kind(self, client: TestClient):
        """Test unknown kind is rejected without touching the catalog."""
        add_all(client, BOOK_1984)
        response = client.post(
            "/api/v1/products",
            json={**BOOK_1984, "kind": "Magazine"}
        )
        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "INVALID_KIND"
        assert data["error"]["details"]["kind"] == "Magazine"
        assert client.get("/api/v1/products/count").json()["total"] == 1

    def test_add_negative_price_rejected(self, client: TestClient):
        """Test request validation on price."""
        response = client.post("/api/v1/products", json={**BOOK_1984, "price": -1})
        assert response.status_code == 422

    def test_remove_product(self, client: TestClient):
        """Test removing the first matching product."""
        add_all(client, BOOK_1984, BOOK_HOBBIT, {**BOOK_1984, "author": "Someone Else"})

        response = client.delete("/api/v1/products/Book/1984")
        assert response.status_code == 200
        data = response.json()
        assert data["removed"] is True
        assert data["total"] == 2

        products = client.get("/api/v1/products").json()["products"]
        assert [(p["title"], p["author"]) for p in products] == [
            ("The Hobbit", "J.R.R. Tolkien"),
            ("1984", "Someone Else"),
        ]

    def test_remove_missing_product(self, client: TestClient):
        """Test removing a missing product is a no-op."""
        add_all(client, BOOK_1984)
        response = client.delete("/api/v1/products/Journal/1984")
        assert response.status_code == 200
        data = response.json()
        assert data["removed"] is False
        assert data["total"] == 1

    def test_title_kept_verbatim(self, client: TestClient):
        """Test a padded title is stored as posted and removable by it."""
        add_all(client, {**BOOK_1984, "title": " 1984 "})
        products = client.get("/api/v1/products").json()["products"]
        assert products[0]["title"] == " 1984 "

        response = client.delete("/api/v1/products/Book/%201984%20")
        assert response.json()["removed"] is True
        assert response.json()["total"] == 0

    def test_sort_by_price(self, client: TestClient):
        """Test end-to-end price sort."""
        add_all(client, BOOK_1984, BOOK_HOBBIT, JOURNAL_FIVE_MINUTE)
        assert client.get("/api/v1/products/count").json()["total"] == 3

        response = client.post("/api/v1/products/sort", json={"key": "price"})
        assert response.status_code == 200
        data = response.json()
        assert [p["title"] for p in data["products"]] == [
            "Five-Minute Journal",
            "1984",
            "The Hobbit",
        ]
        assert data["total"] == 3
        assert client.get("/api/v1/products/count").json()["total"] == 3

    def test_sort_by_title(self, client: TestClient):
        """Test title sort persists for later listings."""
        add_all(client, BOOK_HOBBIT, JOURNAL_FIVE_MINUTE, BOOK_1984)
        client.post("/api/v1/products/sort", json={"key": "title"})

        products = client.get("/api/v1/products").json()["products"]
        assert [p["title"] for p in products] == [
            "1984",
            "Five-Minute Journal",
            "The Hobbit",
        ]

    def test_sort_invalid_key(self, client: TestClient):
        """Test unknown sort key."""
        response = client.post("/api/v1/products/sort", json={"key": "year"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_SORT_KEY"

    def test_genres(self, client: TestClient):
        """Test genres are interned once per name."""
        add_all(client, BOOK_1984, BOOK_HOBBIT, {**BOOK_1984, "title": "Animal Farm"})
        data = client.get("/api/v1/products/genres").json()
        assert data["total"] == 2
        assert data["genres"] == ["Fiction", "Fantasy"]

    def test_stats(self, client: TestClient):
        """Test catalog statistics."""
        add_all(client, BOOK_1984, BOOK_HOBBIT, JOURNAL_FIVE_MINUTE)
        stats = client.get("/api/v1/products/stats").json()["stats"]
        assert stats == {
            "total_products": 3,
            "by_kind": {"Book": 2, "Journal": 1},
            "genres": 3,
        }


class TestSeededCatalog:
    """Tests against the catalog seeded at startup."""

    def test_seed_loaded(self, seeded_client: TestClient):
        """Test the seed file is loaded in order."""
        data = seeded_client.get("/api/v1/products").json()
        assert data["total"] == 7
        assert data["products"][0]["title"] == "Harry Potter"
        assert data["products"][0]["description"] == "Description 1"

    def test_seed_genres(self, seeded_client: TestClient):
        """Test seeded genres are shared."""
        data = seeded_client.get("/api/v1/products/genres").json()
        assert data["genres"] == ["Fantasy", "Fiction", "Life"]

    def test_seeded_price_sort(self, seeded_client: TestClient):
        """Test price sort keeps seed order for equal prices."""
        data = seeded_client.post("/api/v1/products/sort", json={"key": "price"}).json()
        assert [p["title"] for p in data["products"]] == [
            "Five-Minute Journal",
            "Harry Potter",
            "To Kill a Mockingbird",
            "1984",
            "Daily Practices",
            "The Great Gatsby",
            "The Hobbit",
        ]


class TestApplicationState:
    """Tests for the library owned by the application."""

    def test_requests_mutate_owned_library(self, application, client: TestClient):
        """Test the API and the application share one library."""
        add_all(client, BOOK_1984)
        assert application.library.count() == 1
        assert application.library.list_all()[0].title == "1984"

    def test_applications_do_not_share_catalogs(self, client: TestClient, settings):
        """Test each application owns an independent catalog."""
        add_all(client, BOOK_1984)
        other = Application(settings)
        assert other.library.count() == 0

    def test_missing_library(self, settings):
        """Test requests fail cleanly when no library is attached."""
        broken = Application(settings)
        broken.app.state.library = None
        with TestClient(broken.app) as test_client:
            response = test_client.get("/api/v1/products")
            assert response.status_code == 500
            assert response.json()["error"]["code"] == "CATALOG_NOT_LOADED"

            health = test_client.get("/api/v1/health").json()
            assert health["status"] == "degraded"
            assert health["components"]["catalog"] == "not_loaded"
