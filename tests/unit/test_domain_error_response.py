"""Unit tests for ErrorResponse and ErrorMapping value objects."""

import dataclasses

import pytest

from error_responder.core.errors import InvalidErrorCodeError, InvalidStatusCodeError
from error_responder.domain.value_objects import (
    ErrorMapping,
    ErrorResponse,
    is_valid_error_code,
    is_valid_status,
)


@pytest.mark.unit
class TestErrorResponse:
    """Unit tests for ErrorResponse."""

    def test_create_with_defaults(self):
        """Test headers default to empty and validation errors to None."""
        response = ErrorResponse(status=404, error_code=404, message="Not found")

        assert response.status == 404
        assert response.error_code == 404
        assert response.message == "Not found"
        assert response.headers == {}
        assert response.validation_errors is None

    @pytest.mark.parametrize("status", [100, 404, 599])
    def test_valid_statuses(self, status):
        """Test boundary statuses are accepted."""
        assert ErrorResponse(status=status, error_code="x", message="m").status == status

    @pytest.mark.parametrize("status", [99, 600, 999, 0, -1, True, "404", 404.0])
    def test_invalid_statuses_raise(self, status):
        """Test illegal statuses fail construction."""
        with pytest.raises(InvalidStatusCodeError) as exc_info:
            ErrorResponse(status=status, error_code="x", message="m")

        assert exc_info.value.status == status

    def test_is_frozen(self):
        """Test fields cannot be reassigned."""
        response = ErrorResponse(status=500, error_code="x", message="m")

        with pytest.raises(dataclasses.FrozenInstanceError):
            response.status = 404  # type: ignore[misc]

    def test_headers_are_copied(self):
        """Test caller mutations do not leak into the response."""
        headers = {"Retry-After": "30"}
        response = ErrorResponse(
            status=429, error_code="x", message="m", headers=headers
        )

        headers["X-Other"] = "1"

        assert response.headers == {"Retry-After": "30"}

    def test_with_status_validates(self):
        """Test with_status returns a validated copy."""
        response = ErrorResponse(status=500, error_code="x", message="m")

        assert response.with_status(404).status == 404
        assert response.status == 500
        with pytest.raises(InvalidStatusCodeError):
            response.with_status(700)

    def test_with_headers_merges(self):
        """Test with_headers merges over existing headers."""
        response = ErrorResponse(
            status=500, error_code="x", message="m", headers={"A": "1", "B": "2"}
        )

        updated = response.with_headers({"B": "3", "C": "4"})

        assert updated.headers == {"A": "1", "B": "3", "C": "4"}
        assert response.headers == {"A": "1", "B": "2"}

    def test_with_validation_errors(self):
        """Test validation errors are attached on a copy."""
        response = ErrorResponse(status=422, error_code="x", message="m")

        updated = response.with_validation_errors({"email": ["Required"]})

        assert updated.validation_errors == {"email": ["Required"]}
        assert response.validation_errors is None


@pytest.mark.unit
class TestIsValidStatus:
    """Unit tests for is_valid_status()."""

    def test_bool_rejected(self):
        """Test bools are not statuses even though they are ints."""
        assert not is_valid_status(True)


@pytest.mark.unit
class TestErrorMapping:
    """Unit tests for ErrorMapping."""

    def test_from_dict(self):
        """Test mapping from a config dict, ignoring unknown keys."""
        mapping = ErrorMapping.from_dict({"code": "banned", "status": 403, "x": 1})

        assert mapping == ErrorMapping(code="banned", status=403)

    def test_from_dict_partial(self):
        """Test missing fields default to None."""
        assert ErrorMapping.from_dict({"status": 403}) == ErrorMapping(status=403)


@pytest.mark.unit
class TestErrorCodeValidation:
    """Error codes are int or str, never bool."""

    @pytest.mark.parametrize("code", [True, False, None, 1.5, ("a",)])
    def test_invalid_codes_raise(self, code):
        """Test construction rejects codes that are not int or str."""
        with pytest.raises(InvalidErrorCodeError) as exc_info:
            ErrorResponse(status=500, error_code=code, message="m")

        assert exc_info.value.code is code

    @pytest.mark.parametrize("code", [0, 404, "", "user_banned"])
    def test_valid_codes(self, code):
        """Test int and str codes are accepted, including falsy ones."""
        assert is_valid_error_code(code)
        assert ErrorResponse(status=500, error_code=code, message="m").error_code == code
