"""Tests for Settings configuration helpers."""

import pytest

from env_extract.config.settings import Environment, LogLevel, Settings, build_settings


@pytest.fixture
def default_settings():
    """Provide default Settings for comparison."""
    return Settings()


class TestBuildSettings:
    """Test our build_settings helper logic."""

    def test_filters_none_values(self, default_settings):
        """build_settings ignores None overrides."""
        settings = build_settings(
            environment=None,
            log_level=LogLevel.DEBUG,
        )

        assert settings.environment == default_settings.environment
        assert settings.log_level == LogLevel.DEBUG

    def test_applies_all_overrides(self):
        """build_settings applies all non-None overrides."""
        settings = build_settings(
            environment=Environment.TESTING,
            log_level=LogLevel.ERROR,
        )

        assert settings.environment == Environment.TESTING
        assert settings.log_level == LogLevel.ERROR


class TestSettingsModel:
    """Settings defaults and immutability."""

    def test_defaults(self, default_settings):
        """Production and INFO by default."""
        assert default_settings.environment == Environment.PRODUCTION
        assert default_settings.log_level == LogLevel.INFO

    def test_accepts_plain_strings(self):
        """String values coerce to the enums."""
        settings = Settings(environment="testing", log_level="CRITICAL")
        assert settings.environment is Environment.TESTING
        assert settings.log_level is LogLevel.CRITICAL

    def test_frozen(self, default_settings):
        """Settings are immutable."""
        with pytest.raises(Exception):
            default_settings.log_level = LogLevel.DEBUG
