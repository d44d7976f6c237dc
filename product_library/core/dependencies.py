"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the library service.

The application factory stores one ``LibraryService`` on ``app.state``;
routes receive it through ``get_library`` instead of reaching for a global.

Usage Examples:
--------------
    @router.get("/products")
    async def list_products(library: LibraryService = Depends(get_library)):
        return library.list_all()

==============================================================================
"""

from __future__ import annotations

import logging

from fastapi import Request

from product_library.catalog.library import LibraryService
from product_library.core import exceptions


# Module logger
logger = logging.getLogger(__name__)


def get_library(request: Request) -> LibraryService:
    """
    Get the library service attached to the running application.

    Raises:
        AppException: CATALOG_NOT_LOADED if the application has no library
    """
    library = getattr(request.app.state, "library", None)
    if library is None:
        logger.error("Library service requested before startup")
        raise exceptions.catalog_not_loaded()
    return library
