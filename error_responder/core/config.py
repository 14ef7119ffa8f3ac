"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables for the error response layer.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables (complex values as JSON)
- Type validation via Pydantic
- Resolution defaults live in core/constants.py

Usage:
    from error_responder.core.config import settings

    # Access config
    status = settings.default_status
    messages = settings.error_messages

    # Environment detection
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from error_responder.core.constants import (
    DEFAULT_ERROR_CODE,
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_EXCEPTION_SUFFIXES,
    DEFAULT_STATUS,
    MAX_HTTP_STATUS,
    MIN_HTTP_STATUS,
)
from error_responder.core.enums import Environment, ErrorFormat


def _numeric_code(code: int | str | None) -> int | str | None:
    """Turn a canonical all-digit string code into an int.

    JSON object keys are always strings, so ``{"404": "Not found"}`` must
    become the int code ``404`` to match ``error(404)``. Strings that do not
    round-trip (``"0404"``) stay strings.
    """
    if isinstance(code, str) and code.isascii() and code.isdigit():
        if str(int(code)) == code:
            return int(code)
    return code


class Settings(BaseSettings):
    """
    Error layer settings (flat structure).

    Loads configuration from environment variables.

    Configuration precedence:
        1. Environment variables
        2. .env file
        3. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Resolution defaults
    default_status: int = Field(
        default=DEFAULT_STATUS,
        description="HTTP status used when nothing else resolves one",
    )
    default_error_code: str = Field(
        default=DEFAULT_ERROR_CODE,
        description="Error code used when error() is called without a code",
    )
    default_error_message: str = Field(
        default=DEFAULT_ERROR_MESSAGE,
        description="Generic message used when no other message resolves",
    )
    exception_suffixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCEPTION_SUFFIXES),
        description="Type name suffixes stripped when deriving codes (JSON list)",
    )

    # Resolution tables
    error_messages: dict[int | str, str] = Field(
        default_factory=dict,
        description=(
            "Error code to message pairs seeded into the registry (JSON object). "
            "All-digit keys are int codes."
        ),
    )
    exceptions: dict[str, dict[str, int | str | None]] | None = Field(
        default=None,
        description=(
            "Dotted exception path to {code, status} (JSON object). "
            "Entries are layered over the built-in default table."
        ),
    )

    # Output
    error_formatter: ErrorFormat = Field(
        default=ErrorFormat.JSON,
        description="Envelope format (none, json, problem_details)",
    )
    api_base_url: str | None = Field(
        default=None,
        description="Base URL for RFC 9457 problem type URIs (e.g., https://api.example.com)",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("default_status")
    @classmethod
    def validate_default_status(cls, v: int) -> int:
        """
        Validate the default status is a legal HTTP status.

        Args:
            v: Status code.

        Returns:
            int: Validated status code.

        Raises:
            ValueError: If status is not between 100 and 599.
        """
        if not MIN_HTTP_STATUS <= v <= MAX_HTTP_STATUS:
            raise ValueError("default_status must be between 100 and 599")
        return v

    @field_validator("error_messages")
    @classmethod
    def validate_error_message_codes(
        cls, v: dict[int | str, str]
    ) -> dict[int | str, str]:
        """Convert all-digit message keys to int codes."""
        return {_numeric_code(code): message for code, message in v.items()}

    @field_validator("exceptions")
    @classmethod
    def validate_exception_codes(
        cls, v: dict[str, dict[str, int | str | None]] | None
    ) -> dict[str, dict[str, int | str | None]] | None:
        """Convert all-digit configured ``code`` values to int codes."""
        if v is None:
            return v
        return {
            path: (
                {**data, "code": _numeric_code(data["code"])} if "code" in data else data
            )
            for path, data in v.items()
        }

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str | None: URL without trailing slash.
        """
        return v.rstrip("/") if v else v

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
