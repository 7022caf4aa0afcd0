"""
Configuration - Application settings and error taxonomy.
"""

from .errors import (
    BooleanSearchError,
    CredentialsMissingError,
    ErrorCode,
    UpstreamHTTPError,
    UpstreamUnavailableError,
    ValidationError,
    error_code_to_status,
)
from .settings import Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Errors
    "ErrorCode",
    "BooleanSearchError",
    "ValidationError",
    "CredentialsMissingError",
    "UpstreamHTTPError",
    "UpstreamUnavailableError",
    "error_code_to_status",
]
