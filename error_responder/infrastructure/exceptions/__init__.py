"""Exception configuration table."""

from error_responder.infrastructure.exceptions.exception_map import (
    DEFAULT_EXCEPTION_MAP,
    ExceptionMap,
    import_exception,
)

__all__ = ["DEFAULT_EXCEPTION_MAP", "ExceptionMap", "import_exception"]
