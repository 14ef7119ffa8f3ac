"""Output formats for error envelopes.

Selects which formatter (if any) renders the final error payload.

Formats:
- NONE: No formatter, minimal ``{"message": ...}`` envelope
- JSON: Default envelope with success flag, status and error object
- PROBLEM_DETAILS: RFC 9457 Problem Details
"""

from enum import Enum


class ErrorFormat(str, Enum):
    """Error envelope output formats."""

    NONE = "none"
    JSON = "json"
    PROBLEM_DETAILS = "problem_details"
