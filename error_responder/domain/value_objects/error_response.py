"""ErrorResponse value object.

The immutable result of error resolution: everything the transport boundary
needs to serialize a client-facing error.

Invariants:
- status is always an int in the HTTP range (100-599)
- error_code is always an int or str (never a bool)
- message is always set
- headers are copied on construction, so callers cannot mutate them afterwards

Usage:
    from error_responder.domain.value_objects import ErrorResponse

    response = ErrorResponse(status=404, error_code=404, message="Not found")
    response = response.with_headers({"Retry-After": "30"})
"""

from dataclasses import dataclass, field, replace
from collections.abc import Mapping

from error_responder.core.constants import MAX_HTTP_STATUS, MIN_HTTP_STATUS
from error_responder.core.errors import InvalidErrorCodeError, InvalidStatusCodeError

ErrorCodeValue = int | str
"""An error code is either an integer or a string identifier."""

ValidationErrors = dict[str, list[str]]
"""Field name to list of human-readable failure messages."""


def is_valid_status(status: object) -> bool:
    """Check whether a value is a legal HTTP status code."""
    return (
        isinstance(status, int)
        and not isinstance(status, bool)
        and MIN_HTTP_STATUS <= status <= MAX_HTTP_STATUS
    )


def is_valid_error_code(code: object) -> bool:
    """Check whether a value is a usable error code (int or str, not bool)."""
    return isinstance(code, int | str) and not isinstance(code, bool)


@dataclass(frozen=True, slots=True, kw_only=True)
class ErrorResponse:
    """Resolved error response.

    Attributes:
        status: HTTP status code (100-599).
        error_code: Machine-readable error code (int or str).
        message: Human-readable message.
        headers: Extra response headers.
        validation_errors: Field failures, set only when a validator was attached.

    Raises:
        InvalidStatusCodeError: If status is not a legal HTTP status.
        InvalidErrorCodeError: If error_code is not an int or str.
    """

    status: int
    error_code: ErrorCodeValue
    message: str
    headers: dict[str, str] = field(default_factory=dict)
    validation_errors: ValidationErrors | None = None

    def __post_init__(self) -> None:
        """Validate status and code, detach headers from the caller's mapping."""
        if not is_valid_status(self.status):
            raise InvalidStatusCodeError(self.status)
        if not is_valid_error_code(self.error_code):
            raise InvalidErrorCodeError(self.error_code)
        object.__setattr__(self, "headers", dict(self.headers))

    def with_status(self, status: int) -> "ErrorResponse":
        """Return a copy with a different (validated) status."""
        return replace(self, status=status)

    def with_headers(self, headers: Mapping[str, str]) -> "ErrorResponse":
        """Return a copy with headers merged over the existing ones."""
        return replace(self, headers={**self.headers, **headers})

    def with_validation_errors(
        self, validation_errors: ValidationErrors | None
    ) -> "ErrorResponse":
        """Return a copy carrying the given validation failures."""
        return replace(self, validation_errors=validation_errors)
