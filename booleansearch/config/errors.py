"""
Error Taxonomy - Consistent error codes across the application.

Usage:
    from booleansearch.config.errors import ErrorCode, BooleanSearchError

    raise BooleanSearchError(ErrorCode.UPSTREAM_HTTP_ERROR, "Errore ScraperAPI: HTTP 403")

Only the collaborator boundary (API, CLI, proxy adapter) raises these.
The extraction and ranking core degrades to empty results instead.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Standardized error codes for machine-readable error responses."""

    # Request errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Configuration errors
    CONFIG_MISSING_CREDENTIALS = "CONFIG_MISSING_CREDENTIALS"

    # Upstream (scraping proxy) errors
    UPSTREAM_HTTP_ERROR = "UPSTREAM_HTTP_ERROR"
    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


# User-facing messages returned in the ``error`` field of the response envelope
MSG_MISSING_FIELDS = "Dominio e query sono richiesti"
MSG_MISSING_API_KEY = "ScraperAPI key non configurata"
MSG_UPSTREAM_HTTP = "Errore ScraperAPI: HTTP {status}"
MSG_UNEXPECTED = "Errore: {message}"
MSG_NO_RESULTS = "Nessun risultato trovato"


class BooleanSearchError(Exception):
    """Base exception with error code support."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to API-friendly dictionary."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(BooleanSearchError):
    """Missing or blank request fields."""

    def __init__(
        self, message: str = MSG_MISSING_FIELDS, details: dict[str, Any] | None = None
    ) -> None:
        super().__init__(ErrorCode.VALIDATION_ERROR, message, details)


class CredentialsMissingError(BooleanSearchError):
    """Scraping proxy API key is not configured."""

    def __init__(
        self, message: str = MSG_MISSING_API_KEY, details: dict[str, Any] | None = None
    ) -> None:
        super().__init__(ErrorCode.CONFIG_MISSING_CREDENTIALS, message, details)


class UpstreamHTTPError(BooleanSearchError):
    """Scraping proxy answered with a non-2xx status."""

    def __init__(self, status_code: int, details: dict[str, Any] | None = None) -> None:
        self.status_code = status_code
        super().__init__(
            ErrorCode.UPSTREAM_HTTP_ERROR,
            MSG_UPSTREAM_HTTP.format(status=status_code),
            {"status_code": status_code, **(details or {})},
        )


class UpstreamUnavailableError(BooleanSearchError):
    """Network failure while talking to the scraping proxy."""

    def __init__(self, reason: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            ErrorCode.UPSTREAM_UNAVAILABLE,
            MSG_UNEXPECTED.format(message=reason),
            details,
        )


def error_code_to_status(code: ErrorCode) -> int:
    """Map error codes to HTTP status codes."""
    mapping = {
        # 400 Bad Request
        ErrorCode.VALIDATION_ERROR: 400,
    }
    return mapping.get(code, 500)
