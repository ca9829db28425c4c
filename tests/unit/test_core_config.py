"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from VALOBS_* environment variables
- Environment detection
- Validation (log level, default currency)
- Default values
- Cached singleton behavior
"""

import pytest
from pydantic import ValidationError

from valobs.core.config import Settings, get_settings
from valobs.core.enums import Environment
from valobs.domain.value_objects import Money


@pytest.fixture
def clean_env(monkeypatch):
    """Remove VALOBS_* variables so defaults apply."""
    for name in ("VALOBS_ENVIRONMENT", "VALOBS_LOG_LEVEL", "VALOBS_DEFAULT_CURRENCY"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def fresh_settings():
    """Clear the settings cache before and after the test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


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
    """Test default values."""

    def test_defaults(self, clean_env):
        """Test defaults when no variables are set."""
        settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.default_currency == "USD"
        assert settings.is_development is True
        assert settings.is_production is False


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field validation."""

    def test_loads_from_prefixed_environment(self, clean_env):
        """Test VALOBS_* variables override defaults."""
        clean_env.setenv("VALOBS_ENVIRONMENT", "production")
        clean_env.setenv("VALOBS_LOG_LEVEL", "warning")
        clean_env.setenv("VALOBS_DEFAULT_CURRENCY", "eur")

        settings = Settings()

        assert settings.is_production is True
        assert settings.log_level == "WARNING"
        assert settings.default_currency == "EUR"

    def test_unprefixed_variables_are_ignored(self, clean_env):
        """Test plain DEFAULT_CURRENCY does not leak in."""
        clean_env.setenv("DEFAULT_CURRENCY", "JPY")

        assert Settings().default_currency == "USD"

    def test_invalid_log_level(self, clean_env):
        """Test unknown log level names are rejected."""
        clean_env.setenv("VALOBS_LOG_LEVEL", "verbose")

        with pytest.raises(ValidationError) as exc_info:
            Settings()
        assert "Invalid log level" in str(exc_info.value)

    def test_invalid_default_currency(self, clean_env):
        """Test unknown currency codes are rejected."""
        clean_env.setenv("VALOBS_DEFAULT_CURRENCY", "ZZZ")

        with pytest.raises(ValidationError) as exc_info:
            Settings()
        assert "Invalid currency code" in str(exc_info.value)

    def test_invalid_environment(self, clean_env):
        """Test unknown environments are rejected."""
        clean_env.setenv("VALOBS_ENVIRONMENT", "staging")

        with pytest.raises(ValidationError):
            Settings()

    def test_testing_environment(self, clean_env):
        """Test is_testing property."""
        clean_env.setenv("VALOBS_ENVIRONMENT", "testing")

        assert Settings().is_testing is True


@pytest.mark.unit
class TestGetSettings:
    """Test cached settings access."""

    def test_get_settings_is_cached(self, clean_env, fresh_settings):
        """Test repeated calls return the same instance."""
        assert get_settings() is get_settings()

    def test_money_zero_uses_default_currency(self, clean_env, fresh_settings):
        """Test Money.zero() without a currency reads the configured default."""
        clean_env.setenv("VALOBS_DEFAULT_CURRENCY", "JPY")

        zero = Money.zero()

        assert zero.currency == "JPY"
        assert zero.is_zero()

    def test_money_zero_explicit_currency_wins(self, clean_env, fresh_settings):
        """Test an explicit currency ignores the configured default."""
        clean_env.setenv("VALOBS_DEFAULT_CURRENCY", "JPY")

        assert Money.zero("EUR").currency == "EUR"
