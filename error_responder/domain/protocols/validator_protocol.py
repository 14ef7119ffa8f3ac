"""ValidatorProtocol - Structured validation failures.

A validator exposes field-level failures in a library-independent shape so
formatters can merge them into an error envelope.

Usage:
    validator.failed()    # ["email", "age"]
    validator.errors()    # {"email": ["value_error"], "age": ["int_parsing"]}
    validator.messages()  # {"email": ["Invalid email"], "age": ["Must be a number"]}
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ValidatorProtocol(Protocol):
    """Protocol for validators attached to error responses."""

    def failed(self) -> list[str]:
        """Return the names of fields that failed validation, in order."""
        ...

    def errors(self) -> dict[str, list[str]]:
        """Return failed rule codes per field."""
        ...

    def messages(self) -> dict[str, list[str]]:
        """Return human-readable failure messages per field."""
        ...
