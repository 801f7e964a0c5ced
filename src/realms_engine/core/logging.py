"""Structured logging for the rules engine.

The engine logs through structlog. Rule functions only emit ``debug``
events (budget summaries, validation counts); the encounter tracker and
the dice roller emit ``info`` events for every recorded roll. Hosts pick
console or JSON rendering once at startup, typically via
``configure_from_settings``.

Example:
    >>> from realms_engine.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Skill points computed", spent=8, remaining=7)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger

    from realms_engine.core.config import Settings


_STDLIB_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Tag every event with the engine name."""
    event_dict["app"] = "realms_engine"
    return event_dict


def _resolve_level(level: str) -> int:
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def build_processors(*, json_format: bool) -> list[Processor]:
    """Processor chain for structlog.

    Args:
        json_format: Render JSON lines instead of coloured console output.

    Returns:
        The processors, renderer last.
    """
    chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if json_format:
        chain += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        chain.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    return chain


def configure_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | None = None,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL; unknown names
            fall back to INFO.
        json_format: Emit JSON lines (production) instead of console output.
        log_file: Also write stdlib records to this file.

    Example:
        >>> configure_logging(level="DEBUG", json_format=True)
    """
    log_level = _resolve_level(level)

    structlog.configure(
        processors=build_processors(json_format=json_format),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(format=_STDLIB_FORMAT, level=log_level, handlers=handlers, force=True)


def configure_from_settings(settings: Settings | None = None) -> None:
    """Configure logging from ``Settings.log_level`` and ``Settings.json_logs``.

    Debug mode forces the DEBUG level.
    """
    if settings is None:
        from realms_engine.core.config import get_settings

        settings = get_settings()
    level = "DEBUG" if settings.debug else settings.log_level
    configure_logging(level=level, json_format=settings.json_logs)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Return a structlog logger, typically named after the module."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Attach context to every subsequent event in this context.

    Example:
        >>> bind_context(character_id="abc123", step="skills")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


__all__ = [
    "add_app_context",
    "build_processors",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
