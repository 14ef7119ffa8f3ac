"""Error envelope formatters.

Exports:
    JsonFormatter: Default ``{success, status, error}`` envelope
    ProblemDetailsFormatter: RFC 9457 Problem Details envelope
    make_formatter: Pick a formatter from an ErrorFormat value
"""

from error_responder.core.enums import ErrorFormat
from error_responder.domain.protocols import FormatterProtocol
from error_responder.presentation.formatters.json_formatter import JsonFormatter
from error_responder.presentation.formatters.problem_details_formatter import (
    ProblemDetailsFormatter,
)


def make_formatter(
    error_format: ErrorFormat, *, api_base_url: str | None = None
) -> FormatterProtocol | None:
    """Return the formatter for ``error_format`` (None for ErrorFormat.NONE)."""
    if error_format == ErrorFormat.PROBLEM_DETAILS:
        return ProblemDetailsFormatter(api_base_url=api_base_url)
    if error_format == ErrorFormat.JSON:
        return JsonFormatter()
    return None


__all__ = [
    "JsonFormatter",
    "ProblemDetailsFormatter",
    "make_formatter",
]
