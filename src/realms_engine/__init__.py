"""Realms rules engine.

The character build economy and skill-encounter resolution for the Realms
tabletop RPG: point budgets per level, the price of every allocation step,
total spend with species and sub-skill rules, per-step creator validation,
and success/failure counting for skill encounters.

Example:
    >>> from realms_engine import CharacterDraft, CodexSnapshot, ValidationContext, all_issues
    >>> context = ValidationContext.from_codex(CodexSnapshot())
    >>> issues = all_issues(CharacterDraft(name="Ysolde"), context)

Modules:
    core: Configuration, logging, constants and exceptions.
    models: Pydantic V2 schemas for drafts, codex snapshots and encounters.
    engine: The rule functions.
"""

from __future__ import annotations

from realms_engine.core.config import Settings, get_settings
from realms_engine.core.exceptions import RealmsEngineError
from realms_engine.core.logging import configure_logging, get_logger
from realms_engine.engine import (
    SkillPointSummary,
    SkillRollResult,
    ValidationContext,
    all_issues,
    is_finalizable,
    issues_for_step,
    resolve_skill_roll,
    skill_point_summary,
    skill_points_spent,
    total_health_energy_pool,
    total_skill_points,
    total_training_points,
)
from realms_engine.models import (
    CharacterDraft,
    CodexSnapshot,
    CreatorStep,
    EntityKind,
    Severity,
    SkillEncounterState,
    SkillParticipant,
    ValidationIssue,
)


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "RealmsEngineError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "CharacterDraft",
    "CodexSnapshot",
    "CreatorStep",
    "EntityKind",
    "Severity",
    "SkillEncounterState",
    "SkillParticipant",
    "ValidationIssue",
    # Engine
    "SkillPointSummary",
    "SkillRollResult",
    "ValidationContext",
    "all_issues",
    "is_finalizable",
    "issues_for_step",
    "resolve_skill_roll",
    "skill_point_summary",
    "skill_points_spent",
    "total_health_energy_pool",
    "total_skill_points",
    "total_training_points",
]
