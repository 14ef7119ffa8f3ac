"""structlog-backed console logger.

Output goes to stdout. Development renders colored key=value lines; every
other environment renders one JSON object per line so log shippers can parse
resolution records (``error_code``, ``status``, ``exception_type``) directly.

ConsoleAdapter satisfies LoggerProtocol structurally; it does not subclass it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

LOGGER_NAME = "error_responder"


def _renderer(use_json: bool) -> structlog.types.Processor:
    if use_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


def _min_level(level: str) -> int:
    # getLevelName returns "Level X" for names it does not know
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _with_error(context: dict[str, Any], error: BaseException | None) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Structured logger writing to stdout.

    Args:
        use_json: Render JSON lines instead of the colored console format.
        level: Minimum level name. Unknown names mean INFO.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                _renderer(use_json),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(_min_level(level)),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger(LOGGER_NAME)

    @classmethod
    def _wrapping(cls, logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = logger
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log at error level; ``error`` becomes error_type/error_message fields."""
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose records all carry ``context``.

        The receiver is left untouched.
        """
        return self._wrapping(self._logger.bind(**context))

    def with_context(self, **context: Any) -> ConsoleAdapter:
        return self.bind(**context)
