"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Endpoints for adding, removing, sorting and listing catalog products.

==============================================================================
"""

from fastapi import APIRouter, Depends

from product_library.catalog.library import LibraryService
from product_library.catalog.models import ProductResponse
from product_library.core.dependencies import get_library
from product_library.schemas.product import (
    ProductAddedResponse,
    ProductCreate,
    ProductListResponse,
    ProductRemovedResponse,
    SortRequest,
)


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, library: LibraryService):
        self._library = library

    def list_products(self) -> ProductListResponse:
        """List products in current catalog order."""
        products = self._library.list_all()
        return ProductListResponse(total=len(products), products=products)

    def add_product(self, data: ProductCreate) -> ProductAddedResponse:
        """Add a product."""
        product = self._library.add_product(
            data.kind,
            data.title,
            data.author,
            data.genre,
            data.price,
            data.description,
        )
        return ProductAddedResponse(
            product=ProductResponse.from_product(product),
            total=self._library.count(),
        )

    def remove_product(self, kind: str, title: str) -> ProductRemovedResponse:
        """Remove the first product matching kind and title."""
        removed = self._library.remove_product(kind, title)
        return ProductRemovedResponse(removed=removed, total=self._library.count())

    def sort(self, data: SortRequest) -> ProductListResponse:
        """Re-sort the catalog and return the new order."""
        self._library.sort_by(data.key)
        return self.list_products()

    def get_count(self) -> dict:
        """Get product count."""
        return {"success": True, "total": self._library.count()}

    def get_genres(self) -> dict:
        """Get interned genre names."""
        genres = self._library.genres()
        return {"success": True, "total": len(genres), "genres": genres}

    def get_stats(self) -> dict:
        """Get catalog statistics."""
        return {"success": True, "stats": self._library.stats()}


@router.get("", response_model=ProductListResponse)
async def list_products(library: LibraryService = Depends(get_library)):
    """List all products in current order."""
    controller = ProductController(library)
    return controller.list_products()


@router.post("", response_model=ProductAddedResponse)
async def add_product(data: ProductCreate, library: LibraryService = Depends(get_library)):
    """Add a book or journal to the catalog."""
    controller = ProductController(library)
    return controller.add_product(data)


@router.post("/sort", response_model=ProductListResponse)
async def sort_products(data: SortRequest, library: LibraryService = Depends(get_library)):
    """Re-sort the catalog by title or price."""
    controller = ProductController(library)
    return controller.sort(data)


@router.get("/count")
async def count_products(library: LibraryService = Depends(get_library)):
    """Get the number of products."""
    controller = ProductController(library)
    return controller.get_count()


@router.get("/genres")
async def get_genres(library: LibraryService = Depends(get_library)):
    """Get all interned genres."""
    controller = ProductController(library)
    return controller.get_genres()


@router.get("/stats")
async def get_catalog_stats(library: LibraryService = Depends(get_library)):
    """Get catalog statistics."""
    controller = ProductController(library)
    return controller.get_stats()


@router.delete("/{kind}/{title:path}", response_model=ProductRemovedResponse)
async def remove_product(kind: str, title: str, library: LibraryService = Depends(get_library)):
    """Remove the first product with this kind and title."""
    controller = ProductController(library)
    return controller.remove_product(kind, title)
