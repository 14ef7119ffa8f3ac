"""Validator adapters and adapter resolution."""

from error_responder.infrastructure.validation.adapter_factory import (
    AdapterFactory,
    default_adapters,
)
from error_responder.infrastructure.validation.mapping_validator import (
    MappingValidatorAdapter,
)
from error_responder.infrastructure.validation.pydantic_validator import (
    PydanticValidatorAdapter,
    field_from_loc,
)

__all__ = [
    "AdapterFactory",
    "MappingValidatorAdapter",
    "PydanticValidatorAdapter",
    "default_adapters",
    "field_from_loc",
]
