"""
==============================================================================
Library Service Module
==============================================================================

Caller-facing API over one catalog and one genre registry.

The service is constructed explicitly (the application factory keeps one on
``app.state``) rather than living in a module global, so tests and callers
can own independent libraries.

    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ LibraryService  │  ← kind/genre resolution, descriptions
    └───┬─────────┬───┘
        │         │
┌───────▼──┐  ┌───▼────────────┐
│ Catalog  │  │ GenreRegistry  │
└──────────┘  └────────────────┘

Seed File Structure:
-------------------
[
  {"kind": "Book", "title": "1984", "author": "George Orwell",
   "genre": "Fiction", "price": 12.99, "description": "..."},
  ...
]

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from product_library.core.exceptions import AppException

from .builder import build_product
from .catalog import ProductCatalog, SortKey
from .genres import GenreRegistry
from .models import Genre, Product, ProductKind, ProductResponse, with_description


# Module logger
logger = logging.getLogger(__name__)


class LibraryService:
    """
    Product library operations.

    Example:
        >>> library = LibraryService()
        >>> library.add_product("Book", "1984", "George Orwell", "Fiction", 12.99)
        >>> library.sort_by("price")
        >>> library.count()
        1
    """

    def __init__(
        self,
        catalog: Optional[ProductCatalog] = None,
        genres: Optional[GenreRegistry] = None,
    ) -> None:
        self._catalog = catalog if catalog is not None else ProductCatalog()
        self._genres = genres if genres is not None else GenreRegistry()

    @property
    def catalog(self) -> ProductCatalog:
        return self._catalog

    @property
    def genre_registry(self) -> GenreRegistry:
        return self._genres

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def add_product(
        self,
        kind: Union[str, ProductKind],
        title: str,
        author: str,
        genre_name: str,
        price: Optional[float] = None,
        description: Optional[str] = None,
    ) -> Product:
        """
        Build a product and append it to the catalog.

        The kind is checked first and the product is fully built and
        validated before its genre is interned, so a rejected request
        neither adds a product nor registers a genre.

        Raises:
            AppException: INVALID_KIND for an unknown kind tag
            TypeError, ValueError: for wrongly typed fields
        """
        kind = ProductKind.parse(kind)
        product = build_product(kind, title, author, Genre(name=genre_name), price)
        product = with_description(product, description or "")
        product = product.model_copy(update={"genre": self._genres.intern(genre_name)})

        self._catalog.add(product)
        logger.info(f"Added {kind} '{title}' by {author}")
        return product

    def remove_product(self, kind: Union[str, ProductKind], title: str) -> bool:
        """
        Remove the first product matching ``(kind, title)``.

        Returns:
            True if a product was removed, False if nothing matched
        """
        removed = self._catalog.remove(kind, title)
        if removed is None:
            logger.debug(f"No {kind} titled '{title}' to remove")
            return False

        logger.info(f"Removed {removed.kind} '{title}'")
        return True

    def sort_by(self, key: Union[str, SortKey]) -> None:
        """Re-sort the catalog by title or price."""
        self._catalog.sort_by(key)
        logger.info(f"Catalog sorted by {SortKey.parse(key)}")

    # =========================================================================
    # QUERIES
    # =========================================================================

    def list_all(self) -> List[ProductResponse]:
        """Read-only snapshot of the catalog in current order."""
        return [ProductResponse.from_product(product) for product in self._catalog]

    def count(self) -> int:
        return self._catalog.count()

    def genre_count(self) -> int:
        return self._genres.count()

    def genres(self) -> List[str]:
        return self._genres.names()

    def stats(self) -> Dict[str, Any]:
        """Catalog statistics."""
        return {
            "total_products": self._catalog.count(),
            "by_kind": self._catalog.count_by_kind(),
            "genres": self._genres.count(),
        }

    # =========================================================================
    # LOADING
    # =========================================================================

    def load_file(self, path: Path) -> int:
        """
        Add every valid entry from a seed JSON file.

        Entries with a missing field, an unknown kind or a wrongly typed
        value are logged and skipped.

        Args:
            path: Path to the seed file

        Returns:
            Number of products added
        """
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.error(f"Products file not found: {path}")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON: {e}")
            raise

        if not isinstance(data, list):
            logger.warning(f"Expected a list of products in {path}, got {type(data).__name__}")
            return 0

        added = 0
        for position, item in enumerate(data):
            if not isinstance(item, dict) or not all(
                field in item for field in ("kind", "title", "author", "genre")
            ):
                logger.warning(f"Skipping invalid entry #{position} in {path}")
                continue

            try:
                self.add_product(
                    item["kind"],
                    item["title"],
                    item["author"],
                    item["genre"],
                    item.get("price"),
                    item.get("description"),
                )
            except (AppException, TypeError, ValueError) as e:
                logger.warning(f"Skipping entry #{position} in {path}: {e}")
                continue
            added += 1

        logger.info(f"✅ Loaded {added} products from {path}")
        return added
