"""Error message registry implementations."""

from error_responder.infrastructure.registry.error_message_registry import (
    ErrorMessageRegistry,
    normalize_code,
)

__all__ = ["ErrorMessageRegistry", "normalize_code"]
