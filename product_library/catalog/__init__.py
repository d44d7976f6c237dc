"""
==============================================================================
Catalog Package - Product Management
==============================================================================

In-memory catalog of books and journals with genre interning.

Classes:
--------
- ProductKind: Closed set of product kinds
- Genre / GenreRegistry: Interned genres
- Product: Immutable catalog entry
- ProductBuilder: Incremental product construction
- ProductCatalog: Ordered collection with remove and sort
- LibraryService: Caller-facing operations

==============================================================================
"""

from .models import Genre, Product, ProductKind, ProductResponse, with_description
from .genres import GenreRegistry
from .builder import ProductBuilder, build_product
from .catalog import ProductCatalog, SortKey
from .library import LibraryService

__all__ = [
    "Genre",
    "Product",
    "ProductKind",
    "ProductResponse",
    "with_description",
    "GenreRegistry",
    "ProductBuilder",
    "build_product",
    "ProductCatalog",
    "SortKey",
    "LibraryService",
]
