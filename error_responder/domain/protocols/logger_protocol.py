"""Structured logger port.

The builder and the FastAPI handlers log through this protocol only, so any
backend with matching call signatures can be plugged in through the container.

Records are a short constant message plus key-value fields, e.g.::

    logger.debug(
        "Resolved error from exception",
        exception_type="UserBannedException",
        error_code="user_banned",
        status=403,
    )

Levels used by this package:
    DEBUG: which source (table, attribute, derivation) supplied code and status
    WARNING: exceptions converted to 4xx responses
    ERROR: exceptions converted to 5xx responses
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Message plus key-value context logger."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log at error level.

        Args:
            message: Constant message; variable parts belong in ``context``.
            error: Exception whose type and text are added as fields.
            **context: Structured fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that adds ``context`` to every record."""
        ...

    def with_context(self, **context: Any) -> LoggerProtocol: ...
