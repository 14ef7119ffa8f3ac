"""Pytest configuration and shared fixtures.

Fixtures build error builders from explicit collaborators (no container
singletons) so each test controls its registry and exception table.
"""

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from error_responder.domain.value_objects import ErrorMapping
from error_responder.infrastructure.exceptions import ExceptionMap
from error_responder.infrastructure.registry import ErrorMessageRegistry
from error_responder.infrastructure.validation import AdapterFactory
from error_responder.presentation.errors import ErrorResponseBuilder
from error_responder.presentation.formatters import JsonFormatter
from tests.fixtures.exceptions import UserBannedException


@pytest.fixture
def registry() -> ErrorMessageRegistry:
    """Registry seeded with a banned-user message."""
    return ErrorMessageRegistry({"user_banned": "Your account is banned"})


@pytest.fixture
def exception_map() -> ExceptionMap:
    """Exception table mapping UserBannedException to status 403 only."""
    return ExceptionMap({UserBannedException: ErrorMapping(status=403)})


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double satisfying LoggerProtocol."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def make_builder(
    registry: ErrorMessageRegistry,
    exception_map: ExceptionMap,
    mock_logger: MagicMock,
) -> Callable[..., ErrorResponseBuilder]:
    """Factory for builders; keyword overrides replace any collaborator."""

    def _make(**overrides) -> ErrorResponseBuilder:
        kwargs = {
            "message_registry": registry,
            "adapter_factory": AdapterFactory(),
            "exception_map": exception_map,
            "logger": mock_logger,
        }
        kwargs.update(overrides)
        return ErrorResponseBuilder(**kwargs)

    return _make


@pytest.fixture
def builder(make_builder) -> ErrorResponseBuilder:
    """Builder without a formatter (minimal envelope)."""
    return make_builder()


@pytest.fixture
def formatted_builder(make_builder) -> ErrorResponseBuilder:
    """Builder rendering the default JSON envelope."""
    return make_builder(formatter=JsonFormatter())
