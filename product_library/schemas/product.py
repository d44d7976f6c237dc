"""
==============================================================================
Product Schemas Module
==============================================================================

Request and response schemas for catalog endpoints.

Kind and sort key arrive as plain strings; the catalog resolves them and
answers unknown values with INVALID_KIND / INVALID_SORT_KEY.

==============================================================================
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from product_library.catalog.models import ProductResponse


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class ProductCreate(BaseModel):
    """
    Product creation request.

    Titles are kept verbatim since removal matches them exactly.
    """
    kind: str = Field(..., description="Book or Journal")
    title: str
    author: str
    genre: str
    price: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = Field(default=None, max_length=1000)

    @field_validator("author", "genre")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        return v.strip()

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: Optional[str]) -> Optional[str]:
        if v:
            v = v.strip()
            return v if v else None
        return None


class SortRequest(BaseModel):
    """Catalog re-sort request."""
    key: str = Field(..., description="title or price")


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class ProductListResponse(BaseModel):
    """All products in current catalog order."""
    success: bool = True
    total: int = Field(ge=0)
    products: List[ProductResponse]


class ProductAddedResponse(BaseModel):
    """Result of adding a product."""
    success: bool = True
    product: ProductResponse
    total: int = Field(ge=0)


class ProductRemovedResponse(BaseModel):
    """Result of a remove request; ``removed`` is False when nothing matched."""
    success: bool = True
    removed: bool
    total: int = Field(ge=0)
