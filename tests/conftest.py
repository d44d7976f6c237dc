"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides library, application and client fixtures.

==============================================================================
"""

from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from product_library.catalog import GenreRegistry, LibraryService
from product_library.config import Settings
from product_library.main import Application


SEED_FILE = Path(__file__).resolve().parents[1] / "data" / "products.json"


# ============================================================================
# LIBRARY FIXTURES
# ============================================================================

@pytest.fixture
def genres() -> GenreRegistry:
    """Empty genre registry."""
    return GenreRegistry()


@pytest.fixture
def library() -> LibraryService:
    """Empty library service."""
    return LibraryService()


@pytest.fixture
def sample_library(library: LibraryService) -> LibraryService:
    """Library holding 1984, The Hobbit and Five-Minute Journal in that order."""
    library.add_product("Book", "1984", "George Orwell", "Fiction", 12.99)
    library.add_product("Book", "The Hobbit", "J.R.R. Tolkien", "Fantasy", 15.99)
    library.add_product("Journal", "Five-Minute Journal", "Intelligent Change", "Life", 3.99)
    return library


# ============================================================================
# APPLICATION FIXTURES
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings with seeding disabled."""
    return Settings(seed_on_startup=False, debug=False)


@pytest.fixture
def application(settings: Settings) -> Application:
    """Fresh application with its own empty library."""
    return Application(settings)


@pytest.fixture
def client(application: Application) -> Generator[TestClient, None, None]:
    """Test client against an empty catalog."""
    with TestClient(application.app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client() -> Generator[TestClient, None, None]:
    """Test client against a catalog seeded from data/products.json."""
    seeded = Application(
        Settings(seed_on_startup=True, debug=False, products_file=str(SEED_FILE))
    )
    with TestClient(seeded.app) as test_client:
        yield test_client
