"""In-memory error message registry.

Process-wide mapping from error code to human-readable message, used by the
error builder as its fallback message source.

Concurrency:
    Copy-on-write. ``resolve()`` reads the current dict snapshot without
    locking. ``register()`` builds a new dict under a lock and swaps the
    reference, so readers never observe a half-applied registration.

Usage:
    from error_responder.infrastructure.registry import ErrorMessageRegistry

    registry = ErrorMessageRegistry({"user_banned": "Your account is banned"})
    registry.register(404, "Not found")
    registry.resolve("user_banned")  # "Your account is banned"
"""

import threading
from collections.abc import Mapping
from enum import Enum
from typing import Any

from error_responder.core.errors import InvalidRegistrationError
from error_responder.domain.value_objects import ErrorCodeValue, is_valid_error_code


def normalize_code(code: Any) -> ErrorCodeValue:
    """Normalize an error code to a plain int or str.

    Enum members are replaced by their value so ``ErrorCode.NOT_FOUND`` and
    ``"not_found"`` address the same entry.

    Raises:
        InvalidRegistrationError: If the code is not an int or str.
    """
    if isinstance(code, Enum):
        code = code.value
    if not is_valid_error_code(code):
        raise InvalidRegistrationError(
            f"Error code must be int or str, got {type(code).__name__}"
        )
    return code


class ErrorMessageRegistry:
    """Thread-safe error code to message registry.

    Implements ErrorMessageRegistryProtocol structurally.

    Args:
        messages: Optional initial code to message pairs.
    """

    def __init__(self, messages: Mapping[Any, str] | None = None) -> None:
        self._lock = threading.Lock()
        self._messages: dict[ErrorCodeValue, str] = {}
        if messages:
            self.register(messages)

    def register(
        self,
        code: ErrorCodeValue | Mapping[Any, str],
        message: str | None = None,
    ) -> None:
        """Register one code/message pair, or every pair of a mapping.

        With a mapping, ``message`` is ignored and entries are applied in
        iteration order. Existing entries are overwritten. A malformed call
        registers nothing.

        Raises:
            InvalidRegistrationError: Bare code without a message, non-string
                message, or a code that is not an int or str.
        """
        if isinstance(code, Mapping):
            entries = [self._entry(c, m) for c, m in code.items()]
        elif message is None:
            raise InvalidRegistrationError(
                f"No message given for error code {code!r}; "
                "pass a message or a mapping of codes to messages"
            )
        else:
            entries = [self._entry(code, message)]

        with self._lock:
            updated = dict(self._messages)
            updated.update(entries)
            self._messages = updated

    def resolve(self, code: Any) -> str | None:
        """Return the message registered for ``code``, or None.

        Bools never match, although ``True == 1`` as a dict key.
        """
        if isinstance(code, Enum):
            code = code.value
        if code is None or isinstance(code, bool):
            return None
        try:
            return self._messages.get(code)
        except TypeError:
            # Unhashable codes can never have been registered
            return None

    def all(self) -> dict[ErrorCodeValue, str]:
        """Return a snapshot copy of every registered entry."""
        return dict(self._messages)

    def __contains__(self, code: object) -> bool:
        return self.resolve(code) is not None

    def __len__(self) -> int:
        return len(self._messages)

    @staticmethod
    def _entry(code: Any, message: Any) -> tuple[ErrorCodeValue, str]:
        if not isinstance(message, str):
            raise InvalidRegistrationError(
                f"Message for error code {code!r} must be a string, "
                f"got {type(message).__name__}"
            )
        return normalize_code(code), message
