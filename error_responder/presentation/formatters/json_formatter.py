"""Default JSON error envelope.

Shape:
    {
        "success": false,
        "status": 422,
        "error": {
            "code": "validation_failed",
            "message": "The given data was invalid.",
            "fields": {"email": ["Invalid email"]}   # only with a validator
        }
    }
"""

from typing import Any

from error_responder.domain.protocols import ValidatorProtocol
from error_responder.domain.value_objects import ErrorResponse


class JsonFormatter:
    """Render the default error envelope (implements FormatterProtocol)."""

    def error(self, response: ErrorResponse) -> dict[str, Any]:
        return {
            "success": False,
            "status": response.status,
            "error": {
                "code": response.error_code,
                "message": response.message,
            },
        }

    def validator(
        self, data: dict[str, Any], validator: ValidatorProtocol
    ) -> dict[str, Any]:
        error = {**data.get("error", {}), "fields": validator.messages()}
        return {**data, "error": error}
