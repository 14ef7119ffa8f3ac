"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `error_responder/core/config.py` instead.

Categories:
- HTTP status bounds: Valid status code range
- Resolution defaults: Fallbacks used when nothing else resolves

Example:
    >>> from error_responder.core.constants import DEFAULT_STATUS
    >>> DEFAULT_STATUS
    500
"""

# =============================================================================
# HTTP Status Bounds
# =============================================================================

MIN_HTTP_STATUS: int = 100
"""Lowest valid HTTP status code (inclusive)."""

MAX_HTTP_STATUS: int = 599
"""Highest valid HTTP status code (inclusive)."""


# =============================================================================
# Resolution Defaults
# =============================================================================

DEFAULT_STATUS: int = 500
"""Status used when neither the caller nor the exception table supplies one."""

DEFAULT_ERROR_CODE: str = "internal_error"
"""Error code used when the explicit path is called without a code."""

DEFAULT_ERROR_MESSAGE: str = "An unexpected error occurred."
"""Message used when no explicit, registered or exception message exists."""

DEFAULT_EXCEPTION_SUFFIXES: tuple[str, ...] = ("Exception",)
"""Type name suffixes stripped before deriving an error code."""

HTTP_ERROR_CODE: str = "http_error"
"""Error code for HTTP exceptions whose status has no known slug."""

DEFAULT_ERROR_MESSAGES: dict[str, str] = {
    "validation_failed": "The given data was invalid.",
    "unauthenticated": "You are not authenticated for this request.",
    "forbidden": "You are not authorized for this request.",
    "not_found": "The requested resource was not found.",
    "not_implemented": "This operation is not implemented.",
    "timeout": "The operation timed out.",
}
"""Messages seeded into the registry before configured ones."""
