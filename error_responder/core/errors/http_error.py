"""Base class for application exceptions that declare their HTTP shape.

Subclasses may declare ``status``, ``error_code`` and ``headers`` as class
attributes or pass them per instance. The error builder uses them where the
exception configuration table is silent.

Usage:
    class UserBannedException(HttpError):
        status = 403

    class RateLimitedException(HttpError):
        status = 429
        error_code = "rate_limited"

    raise RateLimitedException("Slow down", headers={"Retry-After": "30"})
"""

from collections.abc import Mapping
from typing import ClassVar


class HttpError(Exception):
    """Application exception carrying an optional status, code and headers.

    Attributes:
        status: HTTP status for this exception (None defers to the builder default).
        error_code: Error code (None defers to name derivation).
        headers: Extra response headers.
    """

    status: ClassVar[int | None] = None
    error_code: ClassVar[int | str | None] = None
    headers: ClassVar[Mapping[str, str]] = {}

    def __init__(
        self,
        message: str = "",
        *,
        status: int | None = None,
        error_code: int | str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        if status is not None:
            self.status = status  # type: ignore[misc]
        if error_code is not None:
            self.error_code = error_code  # type: ignore[misc]
        if headers is not None:
            self.headers = {**type(self).headers, **headers}  # type: ignore[misc]
