"""Unit tests for application configuration.

Tests the Settings class in chart_analyst.core.config, ensuring analysis
config fields have correct default values and honor the environment.
"""
from chart_analyst.core.config import Settings, get_settings


class TestSettingsDefaults:
    """Tests for Settings default values."""

    def test_analysis_defaults(self, monkeypatch) -> None:
        """Test analysis config fields have correct defaults."""
        monkeypatch.delenv("EXTENDED_SIGNALS", raising=False)
        settings = Settings()
        assert settings.extended_signals is False
        assert settings.max_bars_per_request == 5000

    def test_api_defaults(self) -> None:
        """Test API config fields have correct defaults."""
        settings = Settings()
        assert settings.api_v1_prefix == "/api/v1"
        assert settings.app_name == "Chart Analyst API"

    def test_environment_flags(self) -> None:
        """Test environment helper properties."""
        assert Settings(environment="development").is_development
        assert not Settings(environment="test").is_development


class TestSettingsEnvironment:
    """Tests for environment variable overrides."""

    def test_extended_signals_from_env(self, monkeypatch) -> None:
        """Test EXTENDED_SIGNALS enables the extended mapping."""
        monkeypatch.setenv("EXTENDED_SIGNALS", "true")
        assert Settings().extended_signals is True

    def test_max_bars_from_env(self, monkeypatch) -> None:
        """Test MAX_BARS_PER_REQUEST is read case-insensitively."""
        monkeypatch.setenv("max_bars_per_request", "250")
        assert Settings().max_bars_per_request == 250


class TestGetSettings:
    """Tests for get_settings() function."""

    def test_get_settings_returns_settings_instance(self) -> None:
        """Test that get_settings() returns a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_is_cached(self) -> None:
        """Test that get_settings() returns the same cached instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
