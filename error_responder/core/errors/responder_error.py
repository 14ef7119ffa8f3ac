"""Raised error types for the error response layer.

Unlike domain errors that flow as data, these signal configuration or
programming defects at the edge of the HTTP boundary. They are raised
synchronously and always propagate to the caller.

Error Types:
- InvalidStatusCodeError: Status outside the HTTP range (100-599)
- MissingAdapterError: No adapter understands a validator input
- InvalidErrorCodeError: Error code is not an int or str
- InvalidRegistrationError: Malformed error message registration
- ResponseNotSetError: Builder materialized before an error was set
- ExceptionMappingError: Exception table entry cannot be resolved

Usage:
    from error_responder.core.errors import InvalidStatusCodeError

    try:
        ErrorResponse(status=999, error_code="oops", message="Oops")
    except InvalidStatusCodeError as e:
        print(e.status)  # 999
"""

from typing import Any


class ResponderError(Exception):
    """Base class for all errors raised by the error response layer."""


class InvalidStatusCodeError(ResponderError):
    """Status code is not a valid HTTP status.

    Attributes:
        status: The rejected status value.
    """

    def __init__(self, status: Any) -> None:
        self.status = status
        super().__init__(f"Invalid HTTP status code: {status!r} (expected 100-599)")


class MissingAdapterError(ResponderError):
    """No registered adapter understands the given value.

    Attributes:
        value_type: Name of the unsupported value's type.
    """

    def __init__(self, value: Any) -> None:
        self.value_type = type(value).__name__
        super().__init__(f"No validator adapter registered for {self.value_type}")


class InvalidErrorCodeError(ResponderError):
    """Error code is not an int or str (bools are rejected).

    Attributes:
        code: The rejected code value.
    """

    def __init__(self, code: Any) -> None:
        self.code = code
        super().__init__(
            f"Error code must be int or str, got {type(code).__name__}: {code!r}"
        )


class InvalidRegistrationError(ResponderError):
    """Error message registration call has a malformed shape."""


class ResponseNotSetError(ResponderError):
    """Builder was asked for output before ``error()`` was called."""

    def __init__(self) -> None:
        super().__init__("No error response set; call error() first")


class ExceptionMappingError(ResponderError):
    """Configured exception path does not resolve to an exception class.

    Attributes:
        path: The dotted path that failed to resolve.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot map exception {path!r}: {reason}")
