"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default values
- Environment variable loading (including JSON values)
- Validation (default_status, URLs)
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from error_responder.core.config import Settings, get_settings
from error_responder.core.enums import Environment, ErrorFormat


@pytest.mark.unit
class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


@pytest.mark.unit
class TestSettingsDefaults:
    """Test Settings defaults with an empty environment."""

    def test_defaults(self):
        """Test resolution defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.default_status == 500
        assert settings.default_error_code == "internal_error"
        assert settings.default_error_message == "An unexpected error occurred."
        assert settings.exception_suffixes == ["Exception"]
        assert settings.error_messages == {}
        assert settings.exceptions is None
        assert settings.error_formatter == ErrorFormat.JSON
        assert settings.api_base_url is None
        assert settings.is_development
        assert not settings.is_production


@pytest.mark.unit
class TestSettingsFromEnvironment:
    """Test Settings loading from environment variables."""

    def test_json_values(self):
        """Test complex values are parsed from JSON."""
        env = {
            "ENVIRONMENT": "production",
            "DEFAULT_STATUS": "503",
            "EXCEPTION_SUFFIXES": '["Exception", "Error"]',
            "ERROR_MESSAGES": '{"user_banned": "Your account is banned"}',
            "EXCEPTIONS": '{"app.errors.UserBannedException": {"status": 403}}',
            "ERROR_FORMATTER": "problem_details",
            "API_BASE_URL": "https://api.example.com/",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)

        assert settings.is_production
        assert settings.default_status == 503
        assert settings.exception_suffixes == ["Exception", "Error"]
        assert settings.error_messages == {"user_banned": "Your account is banned"}
        assert settings.exceptions == {"app.errors.UserBannedException": {"status": 403}}
        assert settings.error_formatter == ErrorFormat.PROBLEM_DETAILS
        assert settings.api_base_url == "https://api.example.com"

    @pytest.mark.parametrize("status", ["99", "600", "999"])
    def test_invalid_default_status(self, status):
        """Test default_status must be a legal HTTP status."""
        with patch.dict(os.environ, {"DEFAULT_STATUS": status}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_invalid_formatter(self):
        """Test unknown formatter names are rejected."""
        with patch.dict(os.environ, {"ERROR_FORMATTER": "xml"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_numeric_message_keys_become_int_codes(self):
        """Test all-digit JSON keys seed int codes; other keys stay strings."""
        env = {
            "ERROR_MESSAGES": '{"404": "Nope", "0404": "Padded", "not_found": "Gone"}'
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)

        assert settings.error_messages == {
            404: "Nope",
            "0404": "Padded",
            "not_found": "Gone",
        }

    def test_numeric_exception_codes_become_int_codes(self):
        """Test all-digit configured exception codes become int codes."""
        env = {
            "EXCEPTIONS": (
                '{"app.errors.UserBannedException": {"code": "4031", "status": 403}, '
                '"app.errors.PaymentFailedException": {"status": 402}}'
            )
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)

        assert settings.exceptions == {
            "app.errors.UserBannedException": {"code": 4031, "status": 403},
            "app.errors.PaymentFailedException": {"status": 402},
        }


@pytest.mark.unit
class TestGetSettings:
    """Test cached settings accessor."""

    def test_get_settings_is_cached(self):
        """Test get_settings returns the same instance."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
