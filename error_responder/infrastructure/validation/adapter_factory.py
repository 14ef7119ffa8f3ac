"""Validator adapter factory.

Resolves arbitrary validator inputs to ValidatorProtocol adapters. Adapters
are matched with ``isinstance`` in registration order; objects that already
implement ValidatorProtocol are returned unchanged.

Usage:
    factory = AdapterFactory()
    factory.make_validator(request_validation_error)  # PydanticValidatorAdapter
    factory.make_validator(object())                  # None

    factory.register(MyFormErrors, MyFormErrorsAdapter)
"""

from collections.abc import Callable, Mapping
from typing import Any

from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError

from error_responder.domain.protocols import ValidatorProtocol
from error_responder.infrastructure.validation.mapping_validator import (
    MappingValidatorAdapter,
)
from error_responder.infrastructure.validation.pydantic_validator import (
    PydanticValidatorAdapter,
)

AdapterClass = Callable[[Any], ValidatorProtocol]


class AdapterFactory:
    """Type-dispatched validator adapter factory.

    Implements AdapterFactoryProtocol structurally.

    Args:
        adapters: Optional ordered (input type, adapter class) pairs. Defaults
            to the pydantic, FastAPI and mapping adapters.
    """

    def __init__(
        self, adapters: list[tuple[type, AdapterClass]] | None = None
    ) -> None:
        self._adapters: list[tuple[type, AdapterClass]] = (
            list(adapters) if adapters is not None else default_adapters()
        )

    def register(self, value_type: type, adapter: AdapterClass) -> None:
        """Register an adapter, taking precedence over existing ones."""
        self._adapters.insert(0, (value_type, adapter))

    def make_validator(self, value: Any) -> ValidatorProtocol | None:
        """Wrap a validator input, or return None if nothing matches."""
        if value is None:
            return None
        if isinstance(value, ValidatorProtocol):
            return value
        for value_type, adapter in self._adapters:
            if isinstance(value, value_type):
                return adapter(value)
        return None


def default_adapters() -> list[tuple[type, AdapterClass]]:
    """Built-in adapters in match order."""
    return [
        (RequestValidationError, PydanticValidatorAdapter),
        (PydanticValidationError, PydanticValidatorAdapter),
        (Mapping, MappingValidatorAdapter),
    ]
