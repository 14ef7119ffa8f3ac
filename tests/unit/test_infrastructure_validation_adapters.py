"""Unit tests for validator adapters and the adapter factory."""

import pytest
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from error_responder.infrastructure.validation import (
    AdapterFactory,
    MappingValidatorAdapter,
    PydanticValidatorAdapter,
    field_from_loc,
)


class SignupForm(BaseModel):
    email: str
    age: int


def make_pydantic_error() -> PydanticValidationError:
    try:
        SignupForm(age="not a number")  # type: ignore[call-arg, arg-type]
    except PydanticValidationError as e:
        return e
    raise AssertionError("SignupForm should not validate")


@pytest.mark.unit
class TestFieldFromLoc:
    """Unit tests for field_from_loc()."""

    @pytest.mark.parametrize(
        ("loc", "expected"),
        [
            (("body", "email"), "email"),
            (("body", "user", "email"), "user.email"),
            (("query", "page"), "page"),
            (("items", 0, "name"), "items.0.name"),
            (("body",), "unknown"),
            ((), "unknown"),
        ],
    )
    def test_locations(self, loc, expected):
        """Test request-part prefixes are dropped and paths dotted."""
        assert field_from_loc(loc) == expected


@pytest.mark.unit
class TestPydanticValidatorAdapter:
    """Unit tests for PydanticValidatorAdapter."""

    def test_pydantic_validation_error(self):
        """Test fields, rule types and messages from a pydantic error."""
        adapter = PydanticValidatorAdapter(make_pydantic_error())

        assert adapter.failed() == ["email", "age"]
        assert adapter.errors() == {"email": ["missing"], "age": ["int_parsing"]}
        assert adapter.messages()["email"] == ["Field required"]
        assert len(adapter.messages()["age"]) == 1

    def test_request_validation_error(self):
        """Test FastAPI request validation errors are grouped by field."""
        exc = RequestValidationError(
            [
                {"type": "missing", "loc": ("body", "email"), "msg": "Field required"},
                {"type": "string_too_short", "loc": ("body", "email"), "msg": "Too short"},
                {"type": "int_parsing", "loc": ("query", "page"), "msg": "Not an int"},
            ]
        )

        adapter = PydanticValidatorAdapter(exc)

        assert adapter.failed() == ["email", "page"]
        assert adapter.errors() == {
            "email": ["missing", "string_too_short"],
            "page": ["int_parsing"],
        }
        assert adapter.messages() == {
            "email": ["Field required", "Too short"],
            "page": ["Not an int"],
        }

    def test_missing_keys_use_defaults(self):
        """Test entries without type or msg still produce output."""
        adapter = PydanticValidatorAdapter(RequestValidationError([{"loc": ("body", "x")}]))

        assert adapter.errors() == {"x": ["validation_error"]}
        assert adapter.messages() == {"x": ["Validation failed"]}


@pytest.mark.unit
class TestMappingValidatorAdapter:
    """Unit tests for MappingValidatorAdapter."""

    def test_string_and_list_messages(self):
        """Test single messages are wrapped in lists."""
        adapter = MappingValidatorAdapter({"email": "Taken", "name": ["Required", "Short"]})

        assert adapter.failed() == ["email", "name"]
        assert adapter.messages() == {"email": ["Taken"], "name": ["Required", "Short"]}
        assert adapter.errors() == {"email": ["invalid"], "name": ["invalid", "invalid"]}


@pytest.mark.unit
class TestAdapterFactory:
    """Unit tests for AdapterFactory."""

    def test_pydantic_error_resolves(self):
        """Test pydantic errors get the pydantic adapter."""
        validator = AdapterFactory().make_validator(make_pydantic_error())

        assert isinstance(validator, PydanticValidatorAdapter)

    def test_request_validation_error_resolves(self):
        """Test FastAPI request errors get the pydantic adapter."""
        validator = AdapterFactory().make_validator(RequestValidationError([]))

        assert isinstance(validator, PydanticValidatorAdapter)

    def test_mapping_resolves(self):
        """Test plain dicts get the mapping adapter."""
        validator = AdapterFactory().make_validator({"email": "Taken"})

        assert isinstance(validator, MappingValidatorAdapter)

    def test_existing_validator_passed_through(self):
        """Test objects already implementing the protocol are returned as-is."""
        validator = MappingValidatorAdapter({"x": "y"})

        assert AdapterFactory().make_validator(validator) is validator

    @pytest.mark.parametrize("value", [None, 42, "text", ["a", "b"], object()])
    def test_unsupported_returns_none(self, value):
        """Test unsupported inputs resolve to None."""
        assert AdapterFactory().make_validator(value) is None

    def test_registered_adapter_takes_precedence(self):
        """Test custom adapters are matched before built-ins."""

        class FormErrors(dict):
            pass

        factory = AdapterFactory()
        factory.register(FormErrors, lambda v: MappingValidatorAdapter({"form": "custom"}))

        validator = factory.make_validator(FormErrors(email="ignored"))

        assert validator.messages() == {"form": ["custom"]}

    def test_empty_adapter_list(self):
        """Test a factory with no adapters resolves nothing but validators."""
        assert AdapterFactory(adapters=[]).make_validator({"x": "y"}) is None
