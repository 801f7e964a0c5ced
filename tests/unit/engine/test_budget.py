"""Tests for the budget calculator."""

from __future__ import annotations

import math

import pytest

from realms_engine.engine.budget import (
    creature_currency,
    level_difference,
    max_archetype_feats,
    max_character_feats,
    normalize_level,
    proficiency,
    progression,
    total_ability_points,
    total_health_energy_pool,
    total_skill_points,
    total_training_points,
)
from realms_engine.models.enums import EntityKind


class TestNormalizeLevel:
    """Tests for level normalisation."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            (1, 1),
            (4.7, 4),
            (0, 1),
            (-3, 1),
            (0.5, 1),
            (None, 1),
            (math.nan, 1),
            (math.inf, 1),
        ],
    )
    def test_normalize(self, level: float | None, expected: int) -> None:
        assert normalize_level(level) == expected


class TestSkillPoints:
    """Tests for total_skill_points."""

    @pytest.mark.parametrize("level", range(1, 21))
    def test_character_formula(self, level: int) -> None:
        assert total_skill_points(level, EntityKind.CHARACTER) == 3 * level

    @pytest.mark.parametrize("level", range(1, 21))
    def test_creature_formula(self, level: int) -> None:
        assert total_skill_points(level, EntityKind.CREATURE) == 5 + 3 * (level - 1)

    @pytest.mark.parametrize("kind", list(EntityKind))
    def test_strictly_increasing(self, kind: EntityKind) -> None:
        values = [total_skill_points(level, kind) for level in range(1, 30)]
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_accepts_plain_string_kind(self) -> None:
        assert total_skill_points(2, "creature") == 8

    def test_fractional_level_is_floored(self) -> None:
        assert total_skill_points(5.9) == 15


class TestOtherBudgets:
    """Tests for ability, training, health-energy and proficiency budgets."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [(1, 7), (3, 7), (4, 8), (6, 8), (7, 9), (10, 10)],
    )
    def test_ability_points(self, level: int, expected: int) -> None:
        assert total_ability_points(level) == expected

    def test_character_training_points(self) -> None:
        assert total_training_points(1, 2) == 24
        assert total_training_points(3, 2) == 22 + 2 + 4 * 2

    def test_creature_training_points(self) -> None:
        assert total_training_points(1, 3, EntityKind.CREATURE) == 12
        assert total_training_points(2, 3, EntityKind.CREATURE) == 12 + 4

    def test_training_points_without_ability(self) -> None:
        assert total_training_points(1) == 22

    def test_health_energy_pool(self) -> None:
        assert total_health_energy_pool(1) == 18
        assert total_health_energy_pool(4) == 24
        assert total_health_energy_pool(1, EntityKind.CREATURE) == 26
        assert total_health_energy_pool(2, EntityKind.CREATURE) == 38

    @pytest.mark.parametrize(
        ("level", "expected"),
        [(1, 2), (4, 2), (5, 3), (9, 3), (10, 4)],
    )
    def test_proficiency(self, level: int, expected: int) -> None:
        assert proficiency(level) == expected

    def test_feat_ceilings_follow_level(self) -> None:
        assert max_archetype_feats(3.5) == 3
        assert max_character_feats(0) == 1

    @pytest.mark.parametrize(
        ("level", "expected"),
        [(1, 200), (2, 290), (4, 610)],
    )
    def test_creature_currency(self, level: int, expected: int) -> None:
        assert creature_currency(level) == expected


class TestProgression:
    """Tests for progression snapshots and level differences."""

    def test_character_snapshot(self) -> None:
        snapshot = progression(5, EntityKind.CHARACTER, highest_ability=3)

        assert snapshot.level == 5
        assert snapshot.skill_points == 15
        assert snapshot.ability_points == 8
        assert snapshot.health_energy_pool == 26
        assert snapshot.training_points == 22 + 3 + 5 * 4
        assert snapshot.proficiency == 3
        assert snapshot.currency == 0

    def test_creature_snapshot_has_currency(self) -> None:
        snapshot = progression(2, EntityKind.CREATURE)
        assert snapshot.currency == 290
        assert snapshot.skill_points == 8

    def test_injected_ability_formula(self) -> None:
        snapshot = progression(4, ability_points=lambda level: level * 2)
        assert snapshot.ability_points == 8

    def test_level_difference(self) -> None:
        diff = level_difference(3, 4, EntityKind.CHARACTER, highest_ability=2)

        assert diff.skill_points == 3
        assert diff.ability_points == 1
        assert diff.health_energy_pool == 2
        assert diff.training_points == 4
        assert diff.proficiency == 0

    def test_level_difference_downwards_is_negative(self) -> None:
        assert level_difference(4, 2).skill_points == -6
