"""
==============================================================================
Product Catalog Module
==============================================================================

Ordered in-memory collection of products.

Features:
---------
- Append and remove-first-match by (kind, title)
- Stable in-place sort by title or price
- Restartable iteration over a snapshot of the current order

Sort Keys:
---------
    title  → plain string compare (case-sensitive)
    price  → ascending numeric compare

==============================================================================
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, Dict, Iterator, List, Optional, Tuple, Union

from product_library.core import exceptions

from .models import Product, ProductKind


# Module logger
logger = logging.getLogger(__name__)


class SortKey(str, enum.Enum):
    """Orderings the catalog can be sorted into."""

    TITLE = "title"
    PRICE = "price"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, key: Union[str, "SortKey"]) -> "SortKey":
        """
        Resolve a sort key.

        Raises:
            AppException: INVALID_SORT_KEY for anything but title/price
        """
        try:
            return cls(key)
        except ValueError:
            raise exceptions.invalid_sort_key(str(key)) from None


_SORT_FUNCTIONS: Dict[SortKey, Callable[[Product], object]] = {
    SortKey.TITLE: lambda product: product.title,
    SortKey.PRICE: lambda product: product.price,
}


class ProductCatalog:
    """
    Ordered product collection.

    Insertion order is kept until ``sort_by`` is called.

    Example:
        >>> catalog = ProductCatalog()
        >>> catalog.add(book)
        >>> catalog.sort_by("price")
        >>> [p.title for p in catalog]
        ['1984']
    """

    def __init__(self) -> None:
        self._products: List[Product] = []

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> Tuple[Product, ...]:
        """Snapshot of all products in current order."""
        return tuple(self._products)

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def add(self, product: Product) -> None:
        """Append a product to the end of the catalog."""
        self._products.append(product)
        logger.debug(f"Added {product.kind} '{product.title}' ({len(self._products)} total)")

    def remove(self, kind: Union[str, ProductKind], title: str) -> Optional[Product]:
        """
        Remove the first product matching ``(kind, title)``.

        Args:
            kind: Product kind; an unknown kind simply matches nothing
            title: Exact title

        Returns:
            The removed product, or None when nothing matched
        """
        for index, product in enumerate(self._products):
            if product.matches(kind, title):
                del self._products[index]
                logger.debug(f"Removed {kind} '{title}' at position {index}")
                return product
        return None

    def sort_by(self, key: Union[str, SortKey]) -> None:
        """
        Reorder the catalog in place.

        The sort is stable, so products with equal keys keep their
        relative order.
        """
        key = SortKey.parse(key)
        self._products.sort(key=_SORT_FUNCTIONS[key])
        logger.debug(f"Sorted {len(self._products)} products by {key}")

    # =========================================================================
    # QUERIES
    # =========================================================================

    def count(self) -> int:
        """Number of products held."""
        return len(self._products)

    def count_by_kind(self) -> Dict[str, int]:
        """Product counts keyed by kind value, including zero counts."""
        counts = {kind.value: 0 for kind in ProductKind}
        for product in self._products:
            counts[product.kind.value] += 1
        return counts

    def __iter__(self) -> Iterator[Product]:
        return iter(tuple(self._products))

    def __len__(self) -> int:
        return self.count()
