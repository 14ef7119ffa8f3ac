"""error-responder: normalized error responses for FastAPI services.

Converts application error codes and caught exceptions into client-facing
error responses with a stable error code, message, HTTP status, headers and
optional validation failures.

Usage:
    from error_responder import get_error_response_builder

    builder = get_error_response_builder()
    builder.error("user_banned").content()
    builder.error(exc).validator(exc).respond()
"""

from error_responder.core.container import (
    get_error_response_builder,
    get_message_registry,
)
from error_responder.core.errors import (
    ExceptionMappingError,
    HttpError,
    InvalidErrorCodeError,
    InvalidRegistrationError,
    InvalidStatusCodeError,
    MissingAdapterError,
    ResponderError,
    ResponseNotSetError,
)
from error_responder.domain.value_objects import ErrorMapping, ErrorResponse
from error_responder.infrastructure.exceptions import DEFAULT_EXCEPTION_MAP, ExceptionMap
from error_responder.infrastructure.registry import ErrorMessageRegistry
from error_responder.infrastructure.validation import AdapterFactory
from error_responder.presentation.errors import (
    ErrorResponseBuilder,
    register_exception_handlers,
)
from error_responder.presentation.formatters import (
    JsonFormatter,
    ProblemDetailsFormatter,
)

__all__ = [
    "AdapterFactory",
    "DEFAULT_EXCEPTION_MAP",
    "ErrorMapping",
    "ErrorMessageRegistry",
    "ErrorResponse",
    "ErrorResponseBuilder",
    "ExceptionMap",
    "ExceptionMappingError",
    "HttpError",
    "InvalidErrorCodeError",
    "InvalidRegistrationError",
    "InvalidStatusCodeError",
    "JsonFormatter",
    "MissingAdapterError",
    "ProblemDetailsFormatter",
    "ResponderError",
    "ResponseNotSetError",
    "get_error_response_builder",
    "get_message_registry",
    "register_exception_handlers",
]
