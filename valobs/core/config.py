"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables with
the ``VALOBS_`` prefix. Value objects themselves take no configuration
beyond the default currency; arithmetic and rounding rules are fixed.

Usage:
    from valobs.core.config import settings

    settings.default_currency   # 'USD' unless VALOBS_DEFAULT_CURRENCY is set
    if settings.is_development:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from valobs.core.enums import Environment
from valobs.domain.value_objects.currency import validate_currency


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (VALOBS_*)
        2. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="VALOBS_",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    default_currency: str = Field(
        default="USD",
        description="ISO 4217 currency used by Money.zero() when none is given",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate and normalize the log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        normalized = v.upper().strip()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return normalized

    @field_validator("default_currency")
    @classmethod
    def validate_default_currency(cls, v: str) -> str:
        """Validate the default currency against the ISO 4217 table."""
        return validate_currency(v)

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """True if environment is TESTING."""
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """True if environment is PRODUCTION."""
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
