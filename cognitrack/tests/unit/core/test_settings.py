"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError

from cognitrack.core.config import Settings, get_settings


@pytest.mark.standalone
class TestSettings:
    """Tests for the Settings class."""

    def test_defaults(self):
        settings = Settings()

        assert settings.CORRELATION_WINDOW_DAYS == 14
        assert settings.PROGRESSION_DEFAULT_DAYS == 365
        assert settings.TREND_WINDOW_SIZE == 3
        assert settings.TREND_DIRECTION_THRESHOLD == 0.5

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("CORRELATION_WINDOW_DAYS", "21")

        assert Settings().CORRELATION_WINDOW_DAYS == 21

    def test_log_level_normalized(self):
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="LOUD")

    def test_trend_window_must_hold_two_points(self):
        with pytest.raises(ValidationError):
            Settings(TREND_WINDOW_SIZE=1)

    def test_get_settings_under_pytest(self):
        settings = get_settings()

        assert settings.TESTING is True
        assert settings.ENVIRONMENT == "test"
