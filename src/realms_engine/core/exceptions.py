"""Exception hierarchy for the Realms character rules engine.

Rule functions never raise on numeric input; they normalise it. The
exceptions below cover the remaining failure modes: invalid settings,
unparseable dice expressions, and tracker operations on participants an
encounter does not contain. Each carries a ``details`` mapping that log
calls can splat straight into structured fields.

Example:
    >>> from realms_engine.core.exceptions import EncounterError
    >>> str(EncounterError("No such participant", participant_id="p-42"))
    "No such participant [participant_id='p-42']"
"""

from __future__ import annotations

from typing import Any


def _merge_details(details: dict[str, Any] | None, **context: Any) -> dict[str, Any]:
    """Copy ``details`` and add every context value that is set."""
    merged = dict(details or {})
    merged.update({key: value for key, value in context.items() if value is not None})
    return merged


class RealmsEngineError(Exception):
    """Base exception for all rules engine errors.

    Attributes:
        message: Human-readable error description.
        details: Extra context, rendered after the message as ``[k=v, ...]``.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = dict(details or {})
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        rendered = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} [{rendered}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, details={self.details!r})"


class ConfigurationError(RealmsEngineError):
    """Raised when settings fail validation or cannot be loaded."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the offending setting name.

        Args:
            message: Human-readable error description.
            config_key: Name of the setting that failed.
            details: Additional error context.
        """
        super().__init__(message, details=_merge_details(details, config_key=config_key))


class EncounterError(RealmsEngineError):
    """Raised when a tracker operation cannot apply to an encounter.

    Usually the participant id is unknown, or already taken when adding.
    """

    def __init__(
        self,
        message: str,
        *,
        participant_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=_merge_details(details, participant_id=participant_id))


class DiceRollError(RealmsEngineError):
    """Raised when a dice expression is blank or d20 rejects it."""

    def __init__(
        self,
        message: str,
        *,
        expression: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=_merge_details(details, expression=expression))


__all__ = [
    "RealmsEngineError",
    "ConfigurationError",
    "EncounterError",
    "DiceRollError",
]
