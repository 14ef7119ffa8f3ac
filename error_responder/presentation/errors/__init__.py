"""Error response building and FastAPI integration.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error envelope schema
    ErrorResponseBuilder: Resolve and assemble error responses
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from error_responder.presentation.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from error_responder.presentation.errors.exception_handlers import (
    register_exception_handlers,
)
from error_responder.presentation.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
