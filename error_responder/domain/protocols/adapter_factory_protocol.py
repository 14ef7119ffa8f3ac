"""AdapterFactoryProtocol - Resolve validator adapters at runtime.

The builder accepts arbitrary validator inputs (a pydantic ValidationError,
a FastAPI RequestValidationError, a plain dict of messages, ...). The adapter
factory wraps them in an object implementing ValidatorProtocol.

Usage:
    validator = adapter_factory.make_validator(exc)
    if validator is None:
        raise MissingAdapterError(exc)
"""

from typing import Any, Protocol

from error_responder.domain.protocols.validator_protocol import ValidatorProtocol


class AdapterFactoryProtocol(Protocol):
    """Protocol for validator adapter resolution."""

    def make_validator(self, value: Any) -> ValidatorProtocol | None:
        """Wrap a validator input in an adapter.

        Args:
            value: Arbitrary validator input.

        Returns:
            Adapter implementing ValidatorProtocol, or None if unsupported.
        """
        ...
