"""Validation issue schema.

Issues are data, not control flow: the engine recomputes them from scratch
on every evaluation and callers decide whether an error blocks a save.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from realms_engine.models.enums import CreatorStep, Severity


class ValidationIssue(BaseModel):
    """A single thing the player should fix or finish.

    Attributes:
        emoji: Short visual tag shown next to the message.
        message: Human-readable description.
        severity: Warning (incomplete) or error (illegal).
        step: Wizard step the issue belongs to, None for finalize-only checks.
    """

    model_config = ConfigDict(frozen=True)

    emoji: str
    message: str = Field(min_length=1)
    severity: Severity
    step: CreatorStep | None = None

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR


__all__ = ["ValidationIssue"]
