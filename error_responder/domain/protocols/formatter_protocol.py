"""FormatterProtocol - Render error envelopes.

Formatting happens in two steps: ``error()`` renders the base envelope from
an ErrorResponse, then ``validator()`` layers validation failures on top of
it. The second step must add to the envelope, never replace it.
"""

from typing import Any, Protocol

from error_responder.domain.protocols.validator_protocol import ValidatorProtocol
from error_responder.domain.value_objects import ErrorResponse


class FormatterProtocol(Protocol):
    """Protocol for error envelope formatters."""

    def error(self, response: ErrorResponse) -> dict[str, Any]:
        """Render the base error envelope."""
        ...

    def validator(
        self, data: dict[str, Any], validator: ValidatorProtocol
    ) -> dict[str, Any]:
        """Merge validation failures into an existing envelope."""
        ...
