"""Error response builder.

This module resolves error codes, messages and statuses from explicit values
or caught exceptions and assembles them into an ErrorResponse and a rendered
error envelope.

Resolution precedence:
    Explicit call ``error(code, message)``:
        code    = code, else the default error code
        message = message, else registry[code], else the default message
        status  = default status

    Exception call ``error(exc)`` / ``error(code, exc)``:
        code    = explicit code, else table[type].code, else exc.error_code
                  (HttpError), else derived from the type name
        message = registry[code], else str(exc), else the default message
        status  = table[type].status, else exc.status (HttpError), else default

Builder states:
    Empty -> ErrorSet (error) -> ErrorSet+Validator (validator) -> Finalized
    (build/content/respond). Calling error() again resets to ErrorSet.

Exports:
    ErrorResponseBuilder: Request-scoped error response builder
"""

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from error_responder.core.constants import (
    DEFAULT_ERROR_CODE,
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_EXCEPTION_SUFFIXES,
    DEFAULT_STATUS,
)
from error_responder.core.errors import (
    HttpError,
    InvalidErrorCodeError,
    MissingAdapterError,
    ResponseNotSetError,
)
from error_responder.core.naming import error_code_from_type
from error_responder.domain.protocols import (
    AdapterFactoryProtocol,
    ErrorMessageRegistryProtocol,
    ExceptionMapProtocol,
    FormatterProtocol,
    LoggerProtocol,
    ResponseFactoryProtocol,
    ValidatorProtocol,
)
from error_responder.domain.value_objects import (
    ErrorCodeValue,
    ErrorMapping,
    ErrorResponse,
    is_valid_error_code,
)
from error_responder.presentation.response_factory import JSONResponseFactory


class ErrorResponseBuilder:
    """Build error responses from error codes or exceptions.

    One builder handles one failure; it is not shared between requests.
    The message registry and exception table are injected and only read.

    Example:
        >>> builder = ErrorResponseBuilder(
        ...     message_registry=registry,
        ...     adapter_factory=AdapterFactory(),
        ...     exception_map=DEFAULT_EXCEPTION_MAP,
        ... )
        >>> builder.error(404, "Not found").content()
        {'message': 'Not found'}
        >>> builder.error(UserBannedException()).build().error_code
        'user_banned'
    """

    def __init__(
        self,
        *,
        message_registry: ErrorMessageRegistryProtocol,
        adapter_factory: AdapterFactoryProtocol,
        exception_map: ExceptionMapProtocol,
        formatter: FormatterProtocol | None = None,
        response_factory: ResponseFactoryProtocol | None = None,
        logger: LoggerProtocol | None = None,
        default_status: int = DEFAULT_STATUS,
        default_error_code: ErrorCodeValue = DEFAULT_ERROR_CODE,
        default_message: str = DEFAULT_ERROR_MESSAGE,
        exception_suffixes: Iterable[str] = DEFAULT_EXCEPTION_SUFFIXES,
    ) -> None:
        self._message_registry = message_registry
        self._adapter_factory = adapter_factory
        self._exception_map = exception_map
        self._formatter = formatter
        self._response_factory = response_factory or JSONResponseFactory()
        self._logger = logger
        self._default_status = default_status
        self._default_error_code = default_error_code
        self._default_message = default_message
        self._exception_suffixes = tuple(exception_suffixes)

        self._response: ErrorResponse | None = None
        self._validator: ValidatorProtocol | None = None
        self._finalized = False

    @property
    def response(self) -> ErrorResponse | None:
        """The currently assembled response (None before error())."""
        return self._response

    @property
    def attached_validator(self) -> ValidatorProtocol | None:
        """The validator attached with validator(), if any."""
        return self._validator

    @property
    def is_finalized(self) -> bool:
        """True once build(), content() or respond() has run."""
        return self._finalized

    def error(
        self,
        error_code: BaseException | ErrorCodeValue | Enum | None = None,
        message: BaseException | str | None = None,
    ) -> "ErrorResponseBuilder":
        """Set the error from an error code and message, or from an exception.

        Call shapes:
            error(code, message)   explicit code and message
            error(exception)       everything resolved from the exception
            error(code, exception) explicit code, rest from the exception

        Args:
            error_code: Error code, or the exception to resolve from.
            message: Message, or the exception to resolve from.

        Returns:
            The builder, for chaining.

        Raises:
            InvalidStatusCodeError: If the resolved status is not a legal HTTP status.
            InvalidErrorCodeError: If the code is not an int, str or Enum of one.
        """
        if isinstance(error_code, BaseException):
            self._response = self._make_response_from_exception(error_code)
        elif isinstance(message, BaseException):
            self._response = self._make_response_from_exception(message, error_code)
        else:
            code = (
                self._normalize_code(error_code)
                if error_code is not None
                else self._default_error_code
            )
            if message is not None and not isinstance(message, str):
                message = str(message)
            self._response = self._make_response(
                code,
                message or self._message_registry.resolve(code) or self._default_message,
                self._default_status,
            )

        self._finalized = False
        return self

    def validator(self, value: Any) -> "ErrorResponseBuilder":
        """Attach a validator whose failures are merged into the envelope.

        Args:
            value: Validator input understood by the adapter factory.

        Returns:
            The builder, for chaining.

        Raises:
            MissingAdapterError: If no adapter understands ``value``. The
                assembled response and any earlier validator are kept.
        """
        validator = self._adapter_factory.make_validator(value)
        if validator is None:
            raise MissingAdapterError(value)

        self._validator = validator
        return self

    def headers(self, headers: Mapping[str, str]) -> "ErrorResponseBuilder":
        """Merge extra headers into the assembled response.

        Raises:
            ResponseNotSetError: If error() has not been called.
        """
        self._response = self._require_response().with_headers(headers)
        return self

    def formatter(self, formatter: FormatterProtocol | None) -> "ErrorResponseBuilder":
        """Replace the output formatter (None renders the minimal envelope)."""
        self._formatter = formatter
        return self

    def build(self) -> ErrorResponse:
        """Materialize the final ErrorResponse.

        Validation failures are attached when a validator was supplied.

        Raises:
            ResponseNotSetError: If error() has not been called.
        """
        response = self._require_response()
        if self._validator is not None:
            response = response.with_validation_errors(self._validator.messages())

        self._finalized = True
        return response

    def content(self) -> dict[str, Any]:
        """Render the error envelope.

        Without a formatter the envelope is ``{"message": ...}``. Otherwise
        the formatter renders the response and, with a validator attached,
        merges its failures on top.

        Raises:
            ResponseNotSetError: If error() has not been called.
        """
        response = self._require_response()
        self._finalized = True
        return self._content_for(response)

    def respond(
        self,
        status: int | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Hand the assembled error to the response factory.

        Args:
            status: Optional status override (validated).
            headers: Optional extra headers.

        Returns:
            Transport response (a FastAPI JSONResponse by default).

        Raises:
            ResponseNotSetError: If error() has not been called.
            InvalidStatusCodeError: If ``status`` is not a legal HTTP status.
        """
        response = self.build()
        if status is not None:
            response = response.with_status(status)
        if headers:
            response = response.with_headers(headers)

        return self._response_factory.make(
            self._content_for(response), response.status, response.headers
        )

    def _make_response_from_exception(
        self,
        exception: BaseException,
        error_code: ErrorCodeValue | Enum | None = None,
    ) -> ErrorResponse:
        mapping = self._exception_map.resolve(exception)
        code = (
            self._normalize_code(error_code)
            if error_code is not None
            else self._resolve_code_from_exception(exception, mapping)
        )
        message = (
            self._message_registry.resolve(code)
            or str(exception)
            or self._default_message
        )
        status = self._resolve_status_from_exception(exception, mapping)
        headers = exception.headers if isinstance(exception, HttpError) else None

        if self._logger is not None:
            self._logger.debug(
                "Resolved error from exception",
                exception_type=type(exception).__name__,
                error_code=code,
                status=status,
                configured=mapping is not None,
            )

        return self._make_response(code, message, status, headers)

    def _resolve_code_from_exception(
        self, exception: BaseException, mapping: ErrorMapping | None
    ) -> ErrorCodeValue:
        if mapping is not None and mapping.code is not None:
            return mapping.code
        if isinstance(exception, HttpError) and exception.error_code is not None:
            return exception.error_code
        return error_code_from_type(type(exception), self._exception_suffixes)

    def _resolve_status_from_exception(
        self, exception: BaseException, mapping: ErrorMapping | None
    ) -> int:
        if mapping is not None and mapping.status is not None:
            return mapping.status
        if isinstance(exception, HttpError) and exception.status is not None:
            return exception.status
        return self._default_status

    def _make_response(
        self,
        error_code: ErrorCodeValue,
        message: str,
        status: int,
        headers: Mapping[str, str] | None = None,
    ) -> ErrorResponse:
        return ErrorResponse(
            status=status,
            error_code=error_code,
            message=message,
            headers=dict(headers or {}),
        )

    def _content_for(self, response: ErrorResponse) -> dict[str, Any]:
        if self._formatter is None:
            return {"message": response.message}

        data = self._formatter.error(response)
        if self._validator is not None:
            data = self._formatter.validator(data, self._validator)
        return data

    def _require_response(self) -> ErrorResponse:
        if self._response is None:
            raise ResponseNotSetError()
        return self._response

    @staticmethod
    def _normalize_code(error_code: ErrorCodeValue | Enum) -> ErrorCodeValue:
        code = error_code.value if isinstance(error_code, Enum) else error_code
        if not is_valid_error_code(code):
            raise InvalidErrorCodeError(code)
        return code
