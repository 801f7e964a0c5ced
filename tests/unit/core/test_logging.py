"""Tests for logging configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from realms_engine.core.config import Settings
from realms_engine.core.logging import (
    add_app_context,
    bind_context,
    build_processors,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo global logging configuration made by a test."""
    yield
    clear_context()
    structlog.reset_defaults()
    for handler in list(logging.getLogger().handlers):
        logging.getLogger().removeHandler(handler)


class TestLogging:
    """Tests for structlog setup."""

    def test_app_context_processor(self) -> None:
        event = add_app_context(None, "info", {"event": "x"})
        assert event["app"] == "realms_engine"

    def test_json_output_includes_context(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="INFO", json_format=True)
        bind_context(character_id="c-1")

        get_logger("test").info("Draft validated", issue_count=2)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "Draft validated"
        assert payload["issue_count"] == 2
        assert payload["character_id"] == "c-1"
        assert payload["app"] == "realms_engine"

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="WARNING", json_format=True)

        get_logger("test").debug("hidden")

        assert "hidden" not in capsys.readouterr().out

    def test_build_processors_renderer_last(self) -> None:
        json_chain = build_processors(json_format=True)
        console_chain = build_processors(json_format=False)

        assert isinstance(json_chain[-1], structlog.processors.JSONRenderer)
        assert isinstance(console_chain[-1], structlog.dev.ConsoleRenderer)
        assert add_app_context in json_chain

    def test_configure_from_settings(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Debug mode lowers the level to DEBUG regardless of log_level."""
        configure_from_settings(Settings(debug=True, log_level="ERROR", json_logs=True))

        get_logger("test").debug("visible")

        payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert payload["event"] == "visible"
        assert payload["level"] == "debug"
