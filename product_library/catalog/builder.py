"""
==============================================================================
Product Builder Module
==============================================================================

Two-step product construction: pick the kind, then fill in the fields.

Assembly Order:
--------------
    ProductBuilder(kind)        ← INVALID_KIND raised here
        .with_title(...)
        .with_author(...)
        .with_genre(...)
        .with_price(...)        ← optional, defaults to 0
        .build()                ← INCOMPLETE_PRODUCT if title/author/genre unset

==============================================================================
"""

from __future__ import annotations

from typing import List, Optional, Union

from product_library.core import exceptions

from .models import Genre, Product, ProductKind


class ProductBuilder:
    """
    Incremental builder for a single product.

    The builder holds a partially filled record; only ``build()`` produces a
    Product, and only once the required fields are set.

    Example:
        >>> product = (
        ...     ProductBuilder("Book")
        ...     .with_title("1984")
        ...     .with_author("George Orwell")
        ...     .with_genre(registry.intern("Fiction"))
        ...     .with_price(12.99)
        ...     .build()
        ... )
    """

    REQUIRED_FIELDS = ("title", "author", "genre")

    def __init__(self, kind: Union[str, ProductKind]) -> None:
        self._kind = ProductKind.parse(kind)
        self._title: Optional[str] = None
        self._author: Optional[str] = None
        self._genre: Optional[Genre] = None
        self._price: float = 0.0

    @property
    def kind(self) -> ProductKind:
        return self._kind

    def with_title(self, title: str) -> "ProductBuilder":
        self._title = title
        return self

    def with_author(self, author: str) -> "ProductBuilder":
        self._author = author
        return self

    def with_genre(self, genre: Genre) -> "ProductBuilder":
        self._genre = genre
        return self

    def with_price(self, price: Optional[float]) -> "ProductBuilder":
        """Set the price; ``None`` keeps the default of 0."""
        self._price = 0.0 if price is None else float(price)
        return self

    def missing_fields(self) -> List[str]:
        """Names of required fields that have not been set yet."""
        return [
            name for name in self.REQUIRED_FIELDS
            if getattr(self, f"_{name}") is None
        ]

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def build(self) -> Product:
        """
        Produce the Product.

        Raises:
            AppException: INCOMPLETE_PRODUCT if a required field is unset
        """
        missing = self.missing_fields()
        if missing:
            raise exceptions.incomplete_product(missing)

        return Product(
            kind=self._kind,
            title=self._title,
            author=self._author,
            genre=self._genre,
            price=self._price,
        )


def build_product(
    kind: Union[str, ProductKind],
    title: str,
    author: str,
    genre: Genre,
    price: Optional[float] = None,
) -> Product:
    """Build a product in one call. The description starts out empty."""
    return (
        ProductBuilder(kind)
        .with_title(title)
        .with_author(author)
        .with_genre(genre)
        .with_price(price)
        .build()
    )
