"""ErrorMapping value object.

One entry of the exception-to-error table: the code and/or status an
exception type maps to. Either field may be omitted, in which case the
builder falls back to its own resolution for that field.
"""

from dataclasses import dataclass
from collections.abc import Mapping
from typing import Any

from error_responder.domain.value_objects.error_response import ErrorCodeValue


@dataclass(frozen=True, slots=True, kw_only=True)
class ErrorMapping:
    """Configured error for an exception type.

    Attributes:
        code: Error code to use instead of the derived one.
        status: HTTP status to use instead of the default.
    """

    code: ErrorCodeValue | None = None
    status: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ErrorMapping":
        """Build a mapping from a ``{"code": ..., "status": ...}`` dict.

        Unknown keys are ignored.
        """
        return cls(code=data.get("code"), status=data.get("status"))
