"""Error code derivation from exception type names.

Derives a stable snake_case error code from an exception's class name when
neither the caller nor the exception table supplies one. The derivation only
looks at the type, never at the message or traceback.

Example:
    >>> error_code_from_type(UserNotFoundException)
    'user_not_found'
    >>> error_code_from_type(HTTPTimeoutException)
    'http_timeout'
"""

import re
from collections.abc import Iterable

from error_responder.core.constants import DEFAULT_EXCEPTION_SUFFIXES

# Boundary before an uppercase letter that follows a lowercase letter or digit,
# or before the last capital of an acronym run ("HTTPTimeout" -> "HTTP_Timeout").
_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def to_snake_case(name: str) -> str:
    """Convert a CamelCase identifier to snake_case.

    Args:
        name: Identifier such as a class name.

    Returns:
        Lowercase, underscore separated identifier.
    """
    return _WORD_BOUNDARY.sub("_", name).lower()


def strip_suffix(name: str, suffixes: Iterable[str]) -> str:
    """Strip the first matching trailing suffix from a name.

    A suffix is only stripped when something is left over, so ``Exception``
    itself stays ``Exception``.
    """
    for suffix in suffixes:
        if suffix and name.endswith(suffix) and len(name) > len(suffix):
            return name[: -len(suffix)]
    return name


def error_code_from_type(
    exc_type: type[BaseException],
    suffixes: Iterable[str] = DEFAULT_EXCEPTION_SUFFIXES,
) -> str:
    """Derive an error code from an exception type's name.

    Args:
        exc_type: Exception class (not instance).
        suffixes: Conventional suffixes to strip before case conversion.

    Returns:
        snake_case error code.
    """
    return to_snake_case(strip_suffix(exc_type.__name__, suffixes))
