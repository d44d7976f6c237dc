"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog items.

- ProductKind: closed set of product kinds (Book, Journal)
- Genre: interned genre record, shared between products
- Product: immutable catalog entry
- ProductResponse: flat view of a product for API responses

==============================================================================
"""

from __future__ import annotations

import enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from product_library.core import exceptions


DESCRIPTION_SEPARATOR = " - "


class ProductKind(str, enum.Enum):
    """
    Product kind enumeration.

    The enum inherits from str to enable JSON serialization.
    """

    BOOK = "Book"
    JOURNAL = "Journal"

    def __str__(self) -> str:
        """Return the enum value as string."""
        return self.value

    @classmethod
    def parse(cls, tag: Union[str, "ProductKind"]) -> "ProductKind":
        """
        Resolve a kind tag.

        Tags are matched exactly, so ``"book"`` is rejected.

        Raises:
            AppException: INVALID_KIND for any other tag
        """
        if isinstance(tag, cls):
            return tag
        for kind in cls:
            if kind.value == tag:
                return kind
        raise exceptions.invalid_kind(str(tag))


class Genre(BaseModel):
    """Genre shared by every product that names it."""

    model_config = ConfigDict(frozen=True)

    name: str


class Product(BaseModel):
    """
    Catalog entry.

    Products are frozen; use ``with_description`` to derive a product with
    an extended description.

    Attributes:
        kind: Book or Journal, fixed at creation
        title: Product title
        author: Author or publisher name
        genre: Interned Genre instance
        price: Price, 0 when not given
        description: Free-text description, empty when not given
    """

    model_config = ConfigDict(frozen=True)

    kind: ProductKind
    title: str
    author: str
    genre: Genre
    price: float = Field(default=0.0, description="Price")
    description: str = Field(default="", description="Description")

    @property
    def genre_name(self) -> str:
        return self.genre.name

    def matches(self, kind: Union[str, ProductKind], title: str) -> bool:
        """Check whether this product is identified by ``(kind, title)``."""
        return self.kind == kind and self.title == title


def with_description(product: Product, text: str) -> Product:
    """
    Return a copy of ``product`` with ``text`` appended to its description.

    An empty ``text`` returns the product unchanged. The original product is
    never modified, and the copy is validated like any new Product.

    Raises:
        TypeError: if ``text`` is not a string

    Example:
        >>> described = with_description(book, "First edition")
        >>> described.description
        'First edition'
    """
    if not isinstance(text, str):
        raise TypeError(f"Description must be a string, got {type(text).__name__}")
    if not text:
        return product

    if product.description:
        description = f"{product.description}{DESCRIPTION_SEPARATOR}{text}"
    else:
        description = text

    return Product(**{**dict(product), "description": description})


class ProductResponse(BaseModel):
    """Flat, read-only view of a product for API responses."""

    model_config = ConfigDict(frozen=True)

    kind: ProductKind
    title: str
    author: str
    genre: str
    price: float
    description: str = ""

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        """Create response from Product model."""
        return cls(
            kind=product.kind,
            title=product.title,
            author=product.author,
            genre=product.genre_name,
            price=product.price,
            description=product.description,
        )
