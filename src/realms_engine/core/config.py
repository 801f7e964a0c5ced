"""Configuration management for the rules engine.

Settings are loaded with pydantic-settings from environment variables and
``.env`` files. Rule functions never read settings implicitly: callers turn
them into explicit arguments, e.g. ``ValidationContext.from_codex(codex,
settings)``.

Environment Variables:
    REALMS_ENGINE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    REALMS_ENGINE_JSON_LOGS: Emit JSON log lines instead of console output
    REALMS_ENGINE_CREATOR_STARTING_CURRENCY: Starting purse for new characters
    REALMS_ENGINE_ENCOUNTER_BASE_DIFFICULTY_SCORE: Base DS for skill encounters
    REALMS_ENGINE_ENCOUNTER_ROLL_EXPRESSION: Dice rolled for skill checks
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from realms_engine.core.constants import BASE_DIFFICULTY_SCORE, STARTING_CURRENCY
from realms_engine.core.exceptions import ConfigurationError


class CreatorSettings(BaseSettings):
    """Configuration for the character creator.

    Attributes:
        starting_currency: Currency a new character may spend on equipment.
    """

    model_config = SettingsConfigDict(
        env_prefix="REALMS_ENGINE_CREATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    starting_currency: int = Field(
        default=STARTING_CURRENCY,
        ge=0,
        description="Starting purse for new characters",
    )


class EncounterSettings(BaseSettings):
    """Configuration for the skill encounter tracker.

    Attributes:
        base_difficulty_score: DS before the party-level adjustment.
        roll_expression: Dice expression rolled for a skill check.
    """

    model_config = SettingsConfigDict(
        env_prefix="REALMS_ENGINE_ENCOUNTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_difficulty_score: int = Field(
        default=BASE_DIFFICULTY_SCORE,
        ge=0,
        le=100,
        description="Base difficulty score for skill encounters",
    )
    roll_expression: str = Field(
        default="1d20",
        description="Dice rolled for a skill check",
    )

    @model_validator(mode="after")
    def validate_roll_expression(self) -> "EncounterSettings":
        """Ensure a roll expression is configured.

        Raises:
            ConfigurationError: If the roll expression is blank.
        """
        if not self.roll_expression.strip():
            raise ConfigurationError(
                "roll_expression must not be empty",
                config_key="roll_expression",
            )
        return self


class Settings(BaseSettings):
    """Top-level engine settings.

    Attributes:
        debug: Enable debug mode.
        log_level: Logging level.
        json_logs: Emit JSON logs.
        creator: Character creator settings.
        encounter: Skill encounter settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="REALMS_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(default=False, description="Emit JSON log lines")

    creator: CreatorSettings = Field(default_factory=CreatorSettings)
    encounter: EncounterSettings = Field(default_factory=EncounterSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached engine settings.

    Returns:
        The Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load engine settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "CreatorSettings",
    "EncounterSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
