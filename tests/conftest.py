"""Pytest configuration and shared fixtures.

Provides a small codex snapshot and a character draft that passes every
validation check, so tests can break exactly one thing at a time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator

    from realms_engine.engine.dice import DiceRoller
    from realms_engine.engine.validation import ValidationContext
    from realms_engine.models.character import CharacterDraft
    from realms_engine.models.codex import CodexSnapshot


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from realms_engine.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Codex Fixtures
# =============================================================================


@pytest.fixture
def codex_data() -> dict[str, Any]:
    """Raw codex content as the persistence layer would return it.

    Skill 12 (Climbing) is a sub-skill of 11 (Athletics); 14 (Tumbling) is
    a sub-skill of 13 (Acrobatics). Species 1 grants Stealth plus the
    free-point sentinel.
    """
    return {
        "species": [
            {
                "id": 1,
                "name": "Elf",
                "skills": [10, 0],
                "ancestry_traits": ["keen-senses", "trance"],
            },
            {
                "id": 2,
                "name": "Golem",
                "skills": [11],
                "ancestry_traits": [],
            },
        ],
        "skills": [
            {"id": 10, "name": "Stealth"},
            {"id": 11, "name": "Athletics"},
            {"id": 12, "name": "Climbing", "base_skill_id": 11},
            {"id": 13, "name": "Acrobatics"},
            {"id": 14, "name": "Tumbling", "base_skill_id": 13},
        ],
    }


@pytest.fixture
def codex(codex_data: dict[str, Any]) -> CodexSnapshot:
    from realms_engine.models.codex import CodexSnapshot

    return CodexSnapshot.model_validate(codex_data)


@pytest.fixture
def validation_context(codex: CodexSnapshot) -> ValidationContext:
    from realms_engine.engine.validation import ValidationContext

    return ValidationContext.from_codex(codex)


# =============================================================================
# Draft Fixtures
# =============================================================================


@pytest.fixture
def complete_draft_data() -> dict[str, Any]:
    """A level 1 draft with every budget spent exactly.

    Skill points: 3 for level 1 plus 1 from the species sentinel = 4.
    Stealth is a species skill at 1 (free), Athletics at 2 costs 2,
    Climbing at 2 costs 2.
    """
    return {
        "name": "Ysolde",
        "level": 1,
        "archetype": {"type": "power", "pow_abil": "acuity"},
        "ancestry": {"id": "1", "name": "Elf", "selectedTraits": ["keen-senses"]},
        "abilities": {
            "strength": 1,
            "vitality": 1,
            "agility": 2,
            "acuity": 1,
            "intelligence": 1,
            "charisma": 1,
        },
        "skills": {"10": 1, "11": 2, "12": 2},
        "feats": [
            {"id": "f1", "name": "Arcane Focus", "type": "archetype"},
            {"id": "f2", "name": "Lucky", "type": "character"},
        ],
        "trainingPointsSpent": 20,
        "equipment": [{"id": "e1", "name": "Travel Kit", "cost": 150}],
        "healthPoints": 10,
        "energyPoints": 8,
    }


@pytest.fixture
def complete_draft(complete_draft_data: dict[str, Any]) -> CharacterDraft:
    from realms_engine.models.character import CharacterDraft

    return CharacterDraft.model_validate(complete_draft_data)


@pytest.fixture
def dice_roller() -> DiceRoller:
    """Provide a seeded dice roller for reproducible tests."""
    from realms_engine.engine.dice import DiceRoller

    return DiceRoller(seed=42)
