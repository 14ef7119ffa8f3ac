"""Dependency factories (composition root).

Application-scoped singletons for the shared, read-mostly collaborators:
- Logging (structlog console adapter)
- Error message registry (seeded from settings)
- Exception configuration table (built-in default plus settings)
- Validator adapter factory
- Output formatter

Request-scoped:
- ErrorResponseBuilder (new instance per call; usable with FastAPI Depends)

Implementations are imported inside the factories so that importing the
container never pulls in the presentation layer.

Usage:
    from error_responder.core.container import get_error_response_builder

    response = get_error_response_builder().error(exc).respond()

    # FastAPI dependency
    @router.get("/users/{user_id}")
    async def get_user(
        user_id: int,
        errors: ErrorResponseBuilder = Depends(get_error_response_builder),
    ): ...
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from error_responder.core.config import settings
from error_responder.core.enums import Environment

if TYPE_CHECKING:
    from error_responder.domain.protocols import (
        AdapterFactoryProtocol,
        ExceptionMapProtocol,
        FormatterProtocol,
        LoggerProtocol,
    )
    from error_responder.infrastructure.registry import ErrorMessageRegistry
    from error_responder.presentation.errors.error_response_builder import (
        ErrorResponseBuilder,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from error_responder.infrastructure.logging import ConsoleAdapter

    use_json = settings.environment != Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


@lru_cache()
def get_message_registry() -> "ErrorMessageRegistry":
    """Return the process-wide error message registry.

    Seeded once with the built-in messages, then ``settings.error_messages``
    (configured entries win); later registrations go
    through ``register()`` on the returned instance.
    """
    from error_responder.core.constants import DEFAULT_ERROR_MESSAGES
    from error_responder.infrastructure.registry import ErrorMessageRegistry

    registry = ErrorMessageRegistry(DEFAULT_ERROR_MESSAGES)
    registry.register(settings.error_messages)
    get_logger().debug("Error message registry seeded", entries=len(registry))
    return registry


@lru_cache()
def get_exception_map() -> "ExceptionMapProtocol":
    """Return the exception configuration table.

    The built-in default table, with ``settings.exceptions`` layered over
    it when configured (configured entries win for the same type).

    Raises:
        ExceptionMappingError: If a configured path cannot be resolved.
    """
    from error_responder.infrastructure.exceptions import (
        DEFAULT_EXCEPTION_MAP,
        ExceptionMap,
    )

    if not settings.exceptions:
        return DEFAULT_EXCEPTION_MAP
    return DEFAULT_EXCEPTION_MAP.merge(ExceptionMap.from_config(settings.exceptions))


@lru_cache()
def get_adapter_factory() -> "AdapterFactoryProtocol":
    """Return the validator adapter factory."""
    from error_responder.infrastructure.validation import AdapterFactory

    return AdapterFactory()


@lru_cache()
def get_formatter() -> "FormatterProtocol | None":
    """Return the configured envelope formatter (None for ``none``)."""
    from error_responder.presentation.formatters import make_formatter

    return make_formatter(settings.error_formatter, api_base_url=settings.api_base_url)


# ============================================================================
# Request-Scoped Dependencies
# ============================================================================


def get_error_response_builder() -> "ErrorResponseBuilder":
    """Create a new error response builder wired to the shared collaborators.

    Returns:
        ErrorResponseBuilder: Fresh builder for one failure.
    """
    from error_responder.presentation.errors.error_response_builder import (
        ErrorResponseBuilder,
    )

    return ErrorResponseBuilder(
        message_registry=get_message_registry(),
        adapter_factory=get_adapter_factory(),
        exception_map=get_exception_map(),
        formatter=get_formatter(),
        logger=get_logger(),
        default_status=settings.default_status,
        default_error_code=settings.default_error_code,
        default_message=settings.default_error_message,
        exception_suffixes=settings.exception_suffixes,
    )
