"""Core shared kernel.

This module provides foundational pieces used across all layers:
- Settings and constants for resolution defaults
- Raised error taxonomy
- Error code derivation from type names

The core module has NO dependencies on other application layers.
"""

from error_responder.core.errors import (
    ExceptionMappingError,
    InvalidErrorCodeError,
    InvalidRegistrationError,
    InvalidStatusCodeError,
    MissingAdapterError,
    ResponderError,
    ResponseNotSetError,
)
from error_responder.core.naming import error_code_from_type, to_snake_case

__all__ = [
    "ExceptionMappingError",
    "InvalidErrorCodeError",
    "InvalidRegistrationError",
    "InvalidStatusCodeError",
    "MissingAdapterError",
    "ResponderError",
    "ResponseNotSetError",
    "error_code_from_type",
    "to_snake_case",
]
