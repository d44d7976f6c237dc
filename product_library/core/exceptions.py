"""
Application Exception Handling

Single AppException class for all application errors with FastAPI integration.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides consistent error response format across the entire API.

    Usage:
        raise AppException("Invalid product kind", "INVALID_KIND", 400)
        raise AppException("Unknown sort key", "INVALID_SORT_KEY", 400, {"key": "year"})

    Error Codes:
        Catalog:
            - INVALID_KIND (400)
            - INVALID_SORT_KEY (400)
            - INCOMPLETE_PRODUCT (422)

        General:
            - CATALOG_NOT_LOADED (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "INVALID_KIND")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert AppException to a JSON error response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def invalid_kind(kind: str) -> AppException:
    """Create invalid product kind exception."""
    return AppException(
        f"Invalid product kind '{kind}'. Expected one of: Book, Journal",
        "INVALID_KIND",
        400,
        {"kind": kind}
    )


def invalid_sort_key(key: str) -> AppException:
    """Create invalid sort key exception."""
    return AppException(
        f"Invalid sort key '{key}'. Expected one of: title, price",
        "INVALID_SORT_KEY",
        400,
        {"key": key}
    )


def incomplete_product(missing: Iterable[str]) -> AppException:
    """Create incomplete product exception."""
    missing = list(missing)
    return AppException(
        f"Product is missing required fields: {', '.join(missing)}",
        "INCOMPLETE_PRODUCT",
        422,
        {"missing": missing}
    )


def catalog_not_loaded() -> AppException:
    """Create catalog not loaded exception."""
    return AppException(
        "Product catalog not loaded",
        "CATALOG_NOT_LOADED",
        500
    )
