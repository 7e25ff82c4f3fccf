"""
Application Exception Handling

Single AppException class for all application errors with FastAPI integration.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides consistent error response format across the entire API.

    Usage:
        raise AppException("Product catalog not loaded", "CATALOG_NOT_LOADED", 500)
        raise AppException("Unknown price range", "INVALID_PRICE_RANGE", 422, {"index": 9})

    Error Codes:
        Catalog:
            - CATALOG_NOT_LOADED (500)
            - CATALOG_LOAD_FAILED (500)

        Query:
            - INVALID_PRICE_RANGE (422)
            - INVALID_MESSAGE (400)

        General:
            - INTERNAL_ERROR (500)
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
            code: Machine-readable error code (e.g., "CATALOG_NOT_LOADED")
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
    """
    FastAPI exception handler for AppException.

    Converts AppException to consistent JSON error response.
    """
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

def catalog_not_loaded() -> AppException:
    """Create catalog not loaded exception."""
    return AppException(
        "Product catalog not loaded",
        "CATALOG_NOT_LOADED",
        500
    )


def catalog_load_failed(path: str, reason: str) -> AppException:
    """Create catalog load failure exception (fatal at startup)."""
    return AppException(
        f"Failed to load product catalog: {reason}",
        "CATALOG_LOAD_FAILED",
        500,
        {"path": path}
    )


def invalid_price_range(index: int, count: int) -> AppException:
    """Create unknown price bracket exception."""
    return AppException(
        f"Price range index must be between 0 and {count - 1}",
        "INVALID_PRICE_RANGE",
        422,
        {"index": index}
    )


def invalid_message(message_type: Optional[str]) -> AppException:
    """Create unsupported websocket message exception."""
    return AppException(
        f"Unsupported message type: {message_type}",
        "INVALID_MESSAGE",
        400,
        {"type": message_type}
    )


def invalid_value(message_type: Optional[str], reason: str) -> AppException:
    """Create rejected interaction value exception."""
    return AppException(
        f"Invalid value for {message_type}: {reason}",
        "INVALID_VALUE",
        422,
        {"type": message_type}
    )


def internal_error(message: str = "Internal server error") -> AppException:
    """Create internal server error exception."""
    return AppException(message, "INTERNAL_ERROR", 500)
