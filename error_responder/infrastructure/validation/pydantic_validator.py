"""Validator adapter for pydantic and FastAPI validation errors.

Wraps ``pydantic.ValidationError`` and ``fastapi.exceptions.RequestValidationError``
so their error lists can be merged into error envelopes.

Field paths:
    The ``loc`` tuple is joined with dots. A leading request-part segment
    (body, query, path, header, cookie) is dropped, so ``("body", "user",
    "email")`` becomes ``"user.email"``. An empty location becomes
    ``"unknown"``.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError

_REQUEST_PARTS = frozenset({"body", "query", "path", "header", "cookie"})


def field_from_loc(loc: Iterable[Any]) -> str:
    """Build a dotted field name from a pydantic error location."""
    parts = [str(p) for p in loc]
    if parts and parts[0] in _REQUEST_PARTS:
        parts = parts[1:]
    return ".".join(parts) if parts else "unknown"


class PydanticValidatorAdapter:
    """ValidatorProtocol adapter over pydantic-style error lists.

    Args:
        error: A pydantic ValidationError or FastAPI RequestValidationError.
    """

    def __init__(self, error: PydanticValidationError | RequestValidationError) -> None:
        self._error = error
        self._errors: list[Mapping[str, Any]] = list(error.errors())

    def failed(self) -> list[str]:
        return list(self.messages())

    def errors(self) -> dict[str, list[str]]:
        return self._group("type", "validation_error")

    def messages(self) -> dict[str, list[str]]:
        return self._group("msg", "Validation failed")

    def _group(self, key: str, default: str) -> dict[str, list[str]]:
        grouped: dict[str, list[str]] = {}
        for item in self._errors:
            field = field_from_loc(item.get("loc", ()))
            grouped.setdefault(field, []).append(str(item.get(key, default)))
        return grouped
