"""ErrorMessageRegistryProtocol - Error code to message lookup.

The registry is the fallback message source for error responses. Codes are
either ints or strings; each exact code value maps to one message.

Usage:
    registry.register("user_banned", "Your account is banned")
    registry.register({404: "Not found", "rate_limited": "Slow down"})
    registry.resolve("user_banned")  # "Your account is banned"
    registry.resolve("unknown")      # None
"""

from collections.abc import Mapping
from typing import Protocol

from error_responder.domain.value_objects import ErrorCodeValue


class ErrorMessageRegistryProtocol(Protocol):
    """Protocol for registering and resolving error messages from error codes."""

    def register(
        self,
        code: ErrorCodeValue | Mapping[ErrorCodeValue, str],
        message: str | None = None,
    ) -> None:
        """Register one code/message pair, or every pair of a mapping.

        Args:
            code: Single error code, or a mapping of code to message.
            message: Message for a single code (ignored for the mapping form).

        Raises:
            InvalidRegistrationError: If the call shape is malformed.
        """
        ...

    def resolve(self, code: ErrorCodeValue | None) -> str | None:
        """Resolve the message registered for a code.

        Args:
            code: Error code to look up.

        Returns:
            Registered message, or None if the code is unregistered.
        """
        ...
