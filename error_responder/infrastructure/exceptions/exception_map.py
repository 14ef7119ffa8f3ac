"""Exception configuration table.

Read-only mapping from exception type to the error code and status it maps
to. Lookups use the exception's concrete type only; subclasses of a mapped
type are not matched.

Usage:
    from error_responder.infrastructure.exceptions import ExceptionMap

    exception_map = ExceptionMap({UserBannedException: ErrorMapping(status=403)})
    exception_map.resolve(UserBannedException())  # ErrorMapping(code=None, status=403)

    # From settings (dotted paths)
    exception_map = DEFAULT_EXCEPTION_MAP.merge(
        ExceptionMap.from_config({"app.errors.UserBannedException": {"status": 403}})
    )
"""

import importlib
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError

from error_responder.core.errors import ExceptionMappingError
from error_responder.domain.value_objects import ErrorMapping, is_valid_status


class ExceptionMap:
    """Immutable exception type to ErrorMapping table.

    Implements ExceptionMapProtocol structurally.

    Args:
        entries: Exception type to mapping pairs.
    """

    def __init__(
        self, entries: Mapping[type[BaseException], ErrorMapping] | None = None
    ) -> None:
        self._entries: Mapping[type[BaseException], ErrorMapping] = MappingProxyType(
            dict(entries or {})
        )

    @classmethod
    def from_config(cls, config: Mapping[str, Mapping[str, Any]]) -> "ExceptionMap":
        """Build a table from dotted exception paths.

        Args:
            config: ``{"package.module.ClassName": {"code": ..., "status": ...}}``.

        Returns:
            ExceptionMap with every entry resolved.

        Raises:
            ExceptionMappingError: If a path does not import to an exception
                class, or a configured status is not a legal HTTP status.
        """
        entries: dict[type[BaseException], ErrorMapping] = {}
        for path, data in config.items():
            mapping = ErrorMapping.from_dict(data)
            if mapping.status is not None and not is_valid_status(mapping.status):
                raise ExceptionMappingError(path, f"invalid status {mapping.status!r}")
            entries[import_exception(path)] = mapping
        return cls(entries)

    def resolve(self, exception: BaseException) -> ErrorMapping | None:
        """Return the entry for the exception's concrete type, if any."""
        return self._entries.get(type(exception))

    @property
    def entries(self) -> Mapping[type[BaseException], ErrorMapping]:
        """Read-only view of every entry."""
        return self._entries

    def merge(
        self,
        entries: "ExceptionMap | Mapping[type[BaseException], ErrorMapping]",
    ) -> "ExceptionMap":
        """Return a new table with ``entries`` layered over this one.

        Entries of the argument win for types present in both.
        """
        if isinstance(entries, ExceptionMap):
            entries = entries.entries
        return ExceptionMap({**self._entries, **entries})

    def __contains__(self, exc_type: object) -> bool:
        return exc_type in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def import_exception(path: str) -> type[BaseException]:
    """Import an exception class from a dotted path.

    Builtins may be given without a module (``"PermissionError"``).

    Raises:
        ExceptionMappingError: If the path cannot be imported or is not an
            exception class.
    """
    module_name, _, attr = path.rpartition(".")
    try:
        module = importlib.import_module(module_name or "builtins")
        exc_type = getattr(module, attr)
    except (ImportError, AttributeError) as e:
        raise ExceptionMappingError(path, str(e)) from e

    if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
        raise ExceptionMappingError(path, "not an exception class")
    return exc_type


DEFAULT_EXCEPTION_MAP = ExceptionMap(
    {
        RequestValidationError: ErrorMapping(code="validation_failed", status=422),
        PydanticValidationError: ErrorMapping(code="validation_failed", status=422),
        PermissionError: ErrorMapping(code="forbidden", status=403),
        NotImplementedError: ErrorMapping(code="not_implemented", status=501),
        TimeoutError: ErrorMapping(code="timeout", status=504),
    }
)
"""Built-in table; configured entries are layered over it."""
