"""Global exception handlers for FastAPI applications.

This module wires the error response builder into FastAPI so unhandled
exceptions become normalized error responses.

Handlers:
    http_exception_handler: Converts HTTPException (status slug as error code)
    validation_exception_handler: Converts RequestValidationError with field errors
    generic_exception_handler: Resolves any other exception through the builder

Exports:
    register_exception_handlers: Register all exception handlers with a FastAPI app
"""

from collections.abc import Callable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from error_responder.core.container import get_error_response_builder, get_logger
from error_responder.core.errors import HttpError
from error_responder.presentation.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from error_responder.presentation.errors.status_info import get_error_slug

BuilderFactory = Callable[[], ErrorResponseBuilder]


def make_http_exception_handler(builder_factory: BuilderFactory):
    """Create a handler converting HTTPException into an error response."""

    async def http_exception_handler(request: Request, exc: Exception) -> Response:
        """Convert HTTPException to an error response.

        The error code is the status slug (404 -> ``not_found``); the message
        is the exception detail; status and headers come from the exception.
        """
        # Type narrowing: registered only for HTTPException
        assert isinstance(exc, StarletteHTTPException)

        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return (
            builder_factory()
            .error(get_error_slug(exc.status_code), detail)
            .respond(status=exc.status_code, headers=exc.headers)
        )

    return http_exception_handler


def make_validation_exception_handler(builder_factory: BuilderFactory):
    """Create a handler converting RequestValidationError with field errors."""

    async def validation_exception_handler(
        request: Request, exc: Exception
    ) -> Response:
        """Convert RequestValidationError to an error response with field errors."""
        # Type narrowing: registered only for RequestValidationError
        assert isinstance(exc, RequestValidationError)

        return builder_factory().error(exc).validator(exc).respond()

    return validation_exception_handler


def make_generic_exception_handler(builder_factory: BuilderFactory):
    """Create the catch-all handler for any other exception."""

    async def generic_exception_handler(request: Request, exc: Exception) -> Response:
        """Resolve an unhandled exception through the builder.

        The exception is logged with its type and message; the traceback is
        never exposed to the client.
        """
        builder = builder_factory().error(exc)
        response = builder.build()

        log = get_logger().bind(
            request_path=request.url.path,
            request_method=request.method,
        )
        if response.status >= 500:
            log.error(
                "Unhandled exception",
                error=exc,
                error_code=response.error_code,
                status=response.status,
            )
        else:
            log.warning(
                "Exception converted to client error",
                exc_type=type(exc).__name__,
                error_code=response.error_code,
                status=response.status,
            )

        return builder.respond()

    return generic_exception_handler


def register_exception_handlers(
    app: FastAPI,
    builder_factory: BuilderFactory = get_error_response_builder,
) -> None:
    """Register all exception handlers with a FastAPI application.

    Args:
        app: FastAPI application instance
        builder_factory: Callable returning a fresh ErrorResponseBuilder

    Example:
        >>> from fastapi import FastAPI
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(
        StarletteHTTPException, make_http_exception_handler(builder_factory)
    )
    app.add_exception_handler(
        RequestValidationError, make_validation_exception_handler(builder_factory)
    )
    # HttpError subclasses are handled before the server error middleware
    app.add_exception_handler(HttpError, make_generic_exception_handler(builder_factory))
    app.add_exception_handler(
        Exception, make_generic_exception_handler(builder_factory)
    )
