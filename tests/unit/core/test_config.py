"""Tests for configuration management."""

from __future__ import annotations

import pytest

from realms_engine.core.config import (
    CreatorSettings,
    EncounterSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from realms_engine.core.exceptions import ConfigurationError


class TestCreatorSettings:
    """Tests for CreatorSettings."""

    def test_default_starting_currency(self) -> None:
        assert CreatorSettings().starting_currency == 200

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REALMS_ENGINE_CREATOR_STARTING_CURRENCY", "350")
        assert CreatorSettings().starting_currency == 350


class TestEncounterSettings:
    """Tests for EncounterSettings."""

    def test_defaults(self) -> None:
        settings = EncounterSettings()
        assert settings.base_difficulty_score == 10
        assert settings.roll_expression == "1d20"

    def test_blank_roll_expression_rejected(self) -> None:
        """Test that a blank roll expression raises ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            EncounterSettings(roll_expression="   ")

        assert "roll_expression" in str(exc_info.value)


class TestSettings:
    """Tests for the top-level Settings."""

    def test_default_settings(self) -> None:
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.debug is False
        assert settings.creator.starting_currency == 200

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REALMS_ENGINE_DEBUG", "true")
        monkeypatch.setenv("REALMS_ENGINE_LOG_LEVEL", "DEBUG")

        settings = Settings()

        assert settings.debug is True
        assert settings.log_level == "DEBUG"


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_returns_cached_instance(self) -> None:
        assert get_settings() is get_settings()

    def test_clear_cache_reloads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("REALMS_ENGINE_LOG_LEVEL", "ERROR")
        clear_settings_cache()

        second = get_settings()

        assert second is not first
        assert second.log_level == "ERROR"

    def test_invalid_env_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Invalid environment values surface as ConfigurationError."""
        monkeypatch.setenv("REALMS_ENGINE_LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError):
            get_settings()
