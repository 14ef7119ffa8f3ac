"""FastAPI response factory.

Turns an assembled error envelope into a ``JSONResponse``.
"""

from collections.abc import Mapping
from typing import Any

from fastapi.responses import JSONResponse


class JSONResponseFactory:
    """Create FastAPI JSON responses (implements ResponseFactoryProtocol)."""

    def make(
        self,
        content: dict[str, Any],
        status: int,
        headers: Mapping[str, str],
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status,
            content=content,
            headers=dict(headers) or None,
        )
