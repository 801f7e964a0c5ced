"""Pydantic V2 data models for the rules engine.

Modules:
    enums: Entity kinds, wizard steps, abilities, defenses, severities.
    character: The character draft and its selections.
    codex: Codex snapshot entries and skill metadata.
    validation: The validation issue record.
    encounter: Skill encounter participants and state.
"""

from __future__ import annotations

from realms_engine.models.character import (
    ArchetypeSelection,
    CharacterDraft,
    DefenseAllocation,
    EquipmentItem,
    FeatSelection,
    SpeciesSelection,
)
from realms_engine.models.codex import (
    CodexSnapshot,
    SkillEntry,
    SkillMeta,
    SpeciesEntry,
    build_skill_meta,
    find_species,
)
from realms_engine.models.encounter import SkillEncounterState, SkillParticipant
from realms_engine.models.enums import (
    Ability,
    ArchetypeCategory,
    CreatorStep,
    Defense,
    EntityKind,
    FeatType,
    Severity,
)
from realms_engine.models.validation import ValidationIssue


__all__ = [
    # Enums
    "Ability",
    "ArchetypeCategory",
    "CreatorStep",
    "Defense",
    "EntityKind",
    "FeatType",
    "Severity",
    # Character
    "ArchetypeSelection",
    "CharacterDraft",
    "DefenseAllocation",
    "EquipmentItem",
    "FeatSelection",
    "SpeciesSelection",
    # Codex
    "CodexSnapshot",
    "SkillEntry",
    "SkillMeta",
    "SpeciesEntry",
    "build_skill_meta",
    "find_species",
    # Validation
    "ValidationIssue",
    # Encounter
    "SkillEncounterState",
    "SkillParticipant",
]
