"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas using Pydantic for validation.

==============================================================================
"""

from .product import (
    ProductCreate,
    SortRequest,
    ProductListResponse,
    ProductAddedResponse,
    ProductRemovedResponse,
)

__all__ = [
    "ProductCreate",
    "SortRequest",
    "ProductListResponse",
    "ProductAddedResponse",
    "ProductRemovedResponse",
]
