"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every field has a default so the core can be embedded without any
environment setup; deployments override what they need.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from resteasy.core.config import settings

    key = settings.include_endpoints_param
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resteasy.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, detailed errors)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="RestEasy",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    api_base_url: str = Field(
        default="https://resteasy.local",
        description="API base URL used to build problem detail type URIs",
    )

    # Route enrichment
    include_endpoints_param: str = Field(
        default="includeEndpoints",
        description="Query parameter that toggles endpoint items on non-listing responses",
    )
    absolute_route_marker: str = Field(
        default="~",
        description="Leading marker flagging a route prefix or fragment as absolute",
    )

    # Transport security
    secure_scheme: str = Field(
        default="https",
        description="The only URL scheme on which authorization is attempted",
    )
    insecure_scheme: str = Field(
        default="http",
        description="Scheme on which leaked client keys are reported",
    )
    credential_length: int = Field(
        default=32,
        description="Length of a client key; keys of this length seen over the insecure scheme are reported",
    )
    credential_log_prefix_length: int = Field(
        default=10,
        description="Number of leading client key characters allowed in logs",
    )

    # Authorization (in-memory adapter)
    client_permissions: dict[str, list[str]] = Field(
        default_factory=dict,
        description='Client key to granted permission level names (JSON, e.g. {"key": ["READ"]})',
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("absolute_route_marker")
    @classmethod
    def validate_absolute_route_marker(cls, v: str) -> str:
        """
        Validate the absolute route marker is a single character.

        Args:
            v: Marker string.

        Returns:
            str: Validated marker.

        Raises:
            ValueError: If marker is not exactly one character.
        """
        if len(v) != 1:
            raise ValueError("absolute_route_marker must be a single character")
        return v

    @field_validator("secure_scheme", "insecure_scheme")
    @classmethod
    def normalize_scheme(cls, v: str) -> str:
        """
        Lowercase URL schemes.

        Args:
            v: Scheme string.

        Returns:
            str: Lowercased scheme.
        """
        return v.lower()

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @model_validator(mode="after")
    def validate_credential_prefix(self) -> "Settings":
        """
        Ensure the logged key prefix never covers the whole client key.

        Returns:
            Settings: Validated settings.

        Raises:
            ValueError: If the prefix length is not shorter than the key length.
        """
        if not 0 <= self.credential_log_prefix_length < self.credential_length:
            raise ValueError(
                "credential_log_prefix_length must be >= 0 and shorter than credential_length"
            )
        return self

    # Convenience property for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT


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
