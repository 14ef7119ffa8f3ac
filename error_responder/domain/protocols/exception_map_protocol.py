"""ExceptionMapProtocol - Exception type to configured error lookup."""

from typing import Protocol

from error_responder.domain.value_objects import ErrorMapping


class ExceptionMapProtocol(Protocol):
    """Protocol for the read-only exception configuration table."""

    def resolve(self, exception: BaseException) -> ErrorMapping | None:
        """Return the entry for the exception's concrete type, if any."""
        ...
