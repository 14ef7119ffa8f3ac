"""HTTP status titles and error code slugs.

Consolidated table used for RFC 9457 titles and for deriving error codes
from bare HTTP exceptions.
"""

from http import HTTPStatus

from error_responder.core.constants import HTTP_ERROR_CODE

# HTTP status code to (title, slug)
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad_request"),
    401: ("Authentication Required", "unauthenticated"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not_found"),
    405: ("Method Not Allowed", "method_not_allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported_media_type"),
    422: ("Validation Failed", "validation_failed"),
    429: ("Too Many Requests", "rate_limit_exceeded"),
    500: ("Internal Server Error", "internal_error"),
    501: ("Not Implemented", "not_implemented"),
    502: ("Bad Gateway", "bad_gateway"),
    503: ("Service Unavailable", "service_unavailable"),
    504: ("Gateway Timeout", "timeout"),
}


def get_status_title(status_code: int) -> str:
    """Get human-readable title for HTTP status code."""
    if status_code in _HTTP_STATUS_INFO:
        return _HTTP_STATUS_INFO[status_code][0]
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def get_error_slug(status_code: int) -> str:
    """Get snake_case error code for HTTP status code."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", HTTP_ERROR_CODE))[1]
