"""Domain value objects.

Exports:
    ErrorResponse: Immutable resolved error response
    ErrorMapping: Exception table entry
"""

from error_responder.domain.value_objects.error_mapping import ErrorMapping
from error_responder.domain.value_objects.error_response import (
    ErrorCodeValue,
    ErrorResponse,
    ValidationErrors,
    is_valid_error_code,
    is_valid_status,
)

__all__ = [
    "ErrorCodeValue",
    "ErrorMapping",
    "ErrorResponse",
    "ValidationErrors",
    "is_valid_error_code",
    "is_valid_status",
]
