"""Budget calculator: total points and pools available at a level.

Every formula floors the level and clamps it to at least 1 first, so a
half-typed level in the editor never produces a fractional or negative
budget. The entity kind is a plain tagged variant dispatched with
``match``.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from realms_engine.core.constants import (
    ABILITY_POINTS_PER_3_LEVELS,
    BASE_ABILITY_POINTS,
    BASE_PROFICIENCY,
    CHARACTER_BASE_HEALTH_ENERGY,
    CHARACTER_BASE_TRAINING_POINTS,
    CHARACTER_HEALTH_ENERGY_PER_LEVEL,
    CHARACTER_SKILL_POINTS_PER_LEVEL,
    CHARACTER_TP_PER_LEVEL,
    CREATURE_BASE_CURRENCY,
    CREATURE_BASE_HEALTH_ENERGY,
    CREATURE_BASE_SKILL_POINTS,
    CREATURE_BASE_TRAINING_POINTS,
    CREATURE_CURRENCY_GROWTH,
    CREATURE_HEALTH_ENERGY_PER_LEVEL,
    CREATURE_SKILL_POINTS_PER_LEVEL,
    CREATURE_TP_PER_LEVEL,
    PROFICIENCY_PER_5_LEVELS,
)
from realms_engine.models.enums import EntityKind


AbilityPointFormula = Callable[[int], int]
"""A level -> ability points progression a caller may inject."""


def normalize_level(level: int | float | None) -> int:
    """Floor a level and clamp it to at least 1.

    Non-finite and missing levels become 1.

    Example:
        >>> normalize_level(4.7)
        4
        >>> normalize_level(-3)
        1
    """
    if level is None:
        return 1
    if isinstance(level, float) and not math.isfinite(level):
        return 1
    return max(1, math.floor(level))


# =============================================================================
# Point Budgets
# =============================================================================


def total_skill_points(level: int | float, kind: EntityKind = EntityKind.CHARACTER) -> int:
    """Total skill points for an entity.

    Characters get 3 per level. Creatures get 5 at level 1 and 3 per level
    after that.
    """
    lvl = normalize_level(level)
    match EntityKind(kind):
        case EntityKind.CREATURE:
            return CREATURE_BASE_SKILL_POINTS + CREATURE_SKILL_POINTS_PER_LEVEL * (lvl - 1)
        case EntityKind.CHARACTER:
            return CHARACTER_SKILL_POINTS_PER_LEVEL * lvl


def total_ability_points(level: int | float) -> int:
    """Default ability point progression: 7, +1 every 3 levels from level 4."""
    lvl = normalize_level(level)
    return BASE_ABILITY_POINTS + ((lvl - 1) // 3) * ABILITY_POINTS_PER_3_LEVELS


def total_training_points(
    level: int | float,
    highest_ability: int = 0,
    kind: EntityKind = EntityKind.CHARACTER,
) -> int:
    """Training points for equipment.

    Depends on the single highest ability score, so it must be recomputed
    whenever abilities change.

    Args:
        level: Entity level.
        highest_ability: The entity's highest ability score.
        kind: Character or creature.

    Returns:
        Total training points.
    """
    lvl = normalize_level(level)
    ability = highest_ability or 0
    match EntityKind(kind):
        case EntityKind.CREATURE:
            per_level = CREATURE_TP_PER_LEVEL + ability
            return CREATURE_BASE_TRAINING_POINTS + ability + per_level * (lvl - 1)
        case EntityKind.CHARACTER:
            per_level = CHARACTER_TP_PER_LEVEL + ability
            return CHARACTER_BASE_TRAINING_POINTS + ability + per_level * (lvl - 1)


def total_health_energy_pool(
    level: int | float,
    kind: EntityKind = EntityKind.CHARACTER,
) -> int:
    """Combined health-energy pool split by the player.

    Characters: 18 at level 1, +2 per level. Creatures: 26, +12 per level.
    """
    lvl = normalize_level(level)
    match EntityKind(kind):
        case EntityKind.CREATURE:
            return CREATURE_BASE_HEALTH_ENERGY + CREATURE_HEALTH_ENERGY_PER_LEVEL * (lvl - 1)
        case EntityKind.CHARACTER:
            return CHARACTER_BASE_HEALTH_ENERGY + CHARACTER_HEALTH_ENERGY_PER_LEVEL * (lvl - 1)


def proficiency(level: int | float) -> int:
    """Proficiency points: 2, +1 every 5 levels."""
    lvl = normalize_level(level)
    return BASE_PROFICIENCY + (lvl // 5) * PROFICIENCY_PER_5_LEVELS


def max_archetype_feats(level: int | float) -> int:
    return normalize_level(level)


def max_character_feats(level: int | float) -> int:
    return normalize_level(level)


def creature_currency(level: int | float) -> int:
    """Creature currency: 200 x 1.45^(level - 1), rounded half up."""
    lvl = normalize_level(level)
    return math.floor(CREATURE_BASE_CURRENCY * CREATURE_CURRENCY_GROWTH ** (lvl - 1) + 0.5)


# =============================================================================
# Progression Snapshots
# =============================================================================


@dataclass(frozen=True)
class Progression:
    """Every budget for one entity at one level.

    Attributes:
        level: Normalised level.
        kind: Character or creature.
        ability_points: Total ability points.
        skill_points: Total skill points.
        health_energy_pool: Health-energy pool.
        training_points: Training points for the given highest ability.
        proficiency: Proficiency points.
        max_archetype_feats: Archetype feat ceiling.
        max_character_feats: Character feat ceiling.
        currency: Creature currency; 0 for characters.
    """

    level: int
    kind: EntityKind
    ability_points: int
    skill_points: int
    health_energy_pool: int
    training_points: int
    proficiency: int
    max_archetype_feats: int
    max_character_feats: int
    currency: int


def progression(
    level: int | float,
    kind: EntityKind = EntityKind.CHARACTER,
    highest_ability: int = 0,
    *,
    ability_points: AbilityPointFormula = total_ability_points,
) -> Progression:
    """Compute every budget for an entity at a level.

    Args:
        level: Entity level.
        kind: Character or creature.
        highest_ability: Highest ability score, for training points.
        ability_points: Ability point progression to use.

    Returns:
        A Progression snapshot.
    """
    lvl = normalize_level(level)
    entity_kind = EntityKind(kind)
    return Progression(
        level=lvl,
        kind=entity_kind,
        ability_points=ability_points(lvl),
        skill_points=total_skill_points(lvl, entity_kind),
        health_energy_pool=total_health_energy_pool(lvl, entity_kind),
        training_points=total_training_points(lvl, highest_ability, entity_kind),
        proficiency=proficiency(lvl),
        max_archetype_feats=max_archetype_feats(lvl),
        max_character_feats=max_character_feats(lvl),
        currency=creature_currency(lvl) if entity_kind == EntityKind.CREATURE else 0,
    )


@dataclass(frozen=True)
class LevelDifference:
    """Budget gained between two levels."""

    ability_points: int
    skill_points: int
    health_energy_pool: int
    training_points: int
    proficiency: int


def level_difference(
    from_level: int | float,
    to_level: int | float,
    kind: EntityKind = EntityKind.CHARACTER,
    highest_ability: int = 0,
) -> LevelDifference:
    """Resources gained (or lost) moving from one level to another.

    Example:
        >>> level_difference(1, 2).skill_points
        3
    """
    before = progression(from_level, kind, highest_ability)
    after = progression(to_level, kind, highest_ability)
    return LevelDifference(
        ability_points=after.ability_points - before.ability_points,
        skill_points=after.skill_points - before.skill_points,
        health_energy_pool=after.health_energy_pool - before.health_energy_pool,
        training_points=after.training_points - before.training_points,
        proficiency=after.proficiency - before.proficiency,
    )


__all__ = [
    "AbilityPointFormula",
    "normalize_level",
    "total_skill_points",
    "total_ability_points",
    "total_training_points",
    "total_health_energy_pool",
    "proficiency",
    "max_archetype_feats",
    "max_character_feats",
    "creature_currency",
    "Progression",
    "progression",
    "LevelDifference",
    "level_difference",
]
