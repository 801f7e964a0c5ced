"""Core module providing configuration, logging, constants and exceptions.

Exports:
    Exceptions:
        RealmsEngineError: Base exception for all engine errors.
        ConfigurationError: Configuration-related errors.
        EncounterError: Skill encounter tracker errors.
        DiceRollError: Dice expression errors.

    Configuration:
        Settings: Top-level settings class.
        get_settings: Get the cached settings.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging, configure_from_settings, get_logger,
        bind_context, clear_context
"""

from __future__ import annotations

from realms_engine.core.config import (
    CreatorSettings,
    EncounterSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from realms_engine.core.exceptions import (
    ConfigurationError,
    DiceRollError,
    EncounterError,
    RealmsEngineError,
)
from realms_engine.core.logging import (
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
)


__all__ = [
    "RealmsEngineError",
    "ConfigurationError",
    "EncounterError",
    "DiceRollError",
    "Settings",
    "CreatorSettings",
    "EncounterSettings",
    "get_settings",
    "clear_settings_cache",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
