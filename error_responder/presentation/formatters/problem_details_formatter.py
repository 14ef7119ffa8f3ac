"""RFC 9457 Problem Details formatter.

Renders ErrorResponse values as Problem Details documents. The problem
``type`` URI is built from the error code under ``{api_base_url}/errors/``;
without a base URL it is ``about:blank`` as RFC 9457 recommends.

Example:
    >>> formatter = ProblemDetailsFormatter(api_base_url="https://api.example.com")
    >>> formatter.error(ErrorResponse(status=404, error_code="not_found", message="Gone"))
    {'type': 'https://api.example.com/errors/not_found', 'title': 'Resource Not Found',
     'status': 404, 'detail': 'Gone', 'code': 'not_found'}
"""

from typing import Any

from error_responder.domain.protocols import ValidatorProtocol
from error_responder.domain.value_objects import ErrorResponse
from error_responder.presentation.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)
from error_responder.presentation.errors.status_info import get_status_title


class ProblemDetailsFormatter:
    """Render RFC 9457 envelopes (implements FormatterProtocol).

    Args:
        api_base_url: Base URL for problem type URIs, or None for ``about:blank``.
    """

    def __init__(self, api_base_url: str | None = None) -> None:
        self._api_base_url = api_base_url.rstrip("/") if api_base_url else None

    def error(self, response: ErrorResponse) -> dict[str, Any]:
        problem = ProblemDetails(
            type=self._problem_type(response.error_code),
            title=get_status_title(response.status),
            status=response.status,
            detail=response.message,
            code=response.error_code,
        )
        return problem.model_dump(exclude_none=True)

    def validator(
        self, data: dict[str, Any], validator: ValidatorProtocol
    ) -> dict[str, Any]:
        rules = validator.errors()
        messages = validator.messages()
        details: list[ErrorDetail] = []
        for field in validator.failed():
            field_messages = messages.get(field, [])
            field_rules = rules.get(field, [])
            for index, message in enumerate(field_messages):
                code = field_rules[index] if index < len(field_rules) else "invalid"
                details.append(ErrorDetail(field=field, code=code, message=message))

        return {**data, "errors": [detail.model_dump() for detail in details]}

    def _problem_type(self, error_code: int | str) -> str:
        if not self._api_base_url:
            return "about:blank"
        return f"{self._api_base_url}/errors/{error_code}"
