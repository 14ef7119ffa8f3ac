"""Core enums package.

Usage:
    from error_responder.core.enums import Environment, ErrorFormat
"""

from error_responder.core.enums.environment import Environment
from error_responder.core.enums.error_format import ErrorFormat

__all__ = [
    "Environment",
    "ErrorFormat",
]
