"""Core errors package.

Exports all raised error classes for convenient importing.

Usage:
    from error_responder.core.errors import InvalidStatusCodeError, MissingAdapterError
    from error_responder.core.errors import HttpError
"""

from error_responder.core.errors.http_error import HttpError
from error_responder.core.errors.responder_error import (
    ExceptionMappingError,
    InvalidErrorCodeError,
    InvalidRegistrationError,
    InvalidStatusCodeError,
    MissingAdapterError,
    ResponderError,
    ResponseNotSetError,
)

__all__ = [
    "HttpError",
    "ResponderError",
    "InvalidStatusCodeError",
    "MissingAdapterError",
    "InvalidErrorCodeError",
    "InvalidRegistrationError",
    "ResponseNotSetError",
    "ExceptionMappingError",
]
