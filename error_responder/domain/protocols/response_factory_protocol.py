"""ResponseFactoryProtocol - Hand assembled errors to the transport.

The builder never creates HTTP responses itself; it passes the rendered
envelope, status and headers to a response factory.
"""

from collections.abc import Mapping
from typing import Any, Protocol


class ResponseFactoryProtocol(Protocol):
    """Protocol for transport response factories."""

    def make(
        self,
        content: dict[str, Any],
        status: int,
        headers: Mapping[str, str],
    ) -> Any:
        """Create a transport response.

        Args:
            content: Rendered error envelope.
            status: HTTP status code.
            headers: Response headers.

        Returns:
            Transport-specific response object.
        """
        ...
