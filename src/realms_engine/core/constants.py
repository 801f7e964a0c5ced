"""Rule constants for character building and skill encounters.

Every budget and cost formula in ``realms_engine.engine`` reads its numbers
from here.
"""

from __future__ import annotations

# =============================================================================
# Skill Costs
# =============================================================================

SKILL_VALUE_CAP = 3
"""Soft cap on skill value; raising past it costs more per step."""

BASE_SKILL_PAST_CAP_COST = 3
"""Cost per step for a base skill at or above the soft cap."""

SUB_SKILL_PAST_CAP_COST = 2
"""Cost per step for a sub-skill at or above the soft cap."""

SKILL_STEP_COST = 1
"""Cost per step below the soft cap."""

PROFICIENCY_COST = 1
"""Cost to gain proficiency (sub-skills also gain +1 value)."""

SKILL_DECREASE_REFUND = 1
"""Refund per step down, including the step that removes proficiency."""

DEFENSE_INCREASE_COST = 2
"""Skill points per +1 purchased defense bonus."""

DEFENSE_PURCHASE_MAX = 3
"""Maximum purchased bonus on a single defense."""

FREE_SKILL_POINT_SENTINEL = "0"
"""Species skill id that grants one extra skill point instead of a skill."""

# =============================================================================
# Skill Point Progression
# =============================================================================

CHARACTER_SKILL_POINTS_PER_LEVEL = 3
"""Characters gain 3 skill points per level."""

CREATURE_BASE_SKILL_POINTS = 5
"""Creatures start with 5 skill points at level 1."""

CREATURE_SKILL_POINTS_PER_LEVEL = 3
"""Creatures gain 3 skill points per level after the first."""

# =============================================================================
# Abilities
# =============================================================================

BASE_ABILITY_POINTS = 7
ABILITY_POINTS_PER_3_LEVELS = 1

ABILITY_MIN = -2
ABILITY_MAX_STARTING = 3
ABILITY_MAX_ABSOLUTE = 6
ABILITY_COST_INCREASE_THRESHOLD = 4
"""Raising an ability at or above this value costs 2 points."""

# =============================================================================
# Training Points, Health-Energy, Proficiency
# =============================================================================

CHARACTER_BASE_TRAINING_POINTS = 22
CHARACTER_TP_PER_LEVEL = 2
CREATURE_BASE_TRAINING_POINTS = 9
CREATURE_TP_PER_LEVEL = 1

CHARACTER_BASE_HEALTH_ENERGY = 18
CHARACTER_HEALTH_ENERGY_PER_LEVEL = 2
CREATURE_BASE_HEALTH_ENERGY = 26
CREATURE_HEALTH_ENERGY_PER_LEVEL = 12

BASE_PROFICIENCY = 2
PROFICIENCY_PER_5_LEVELS = 1

CREATURE_BASE_CURRENCY = 200
CREATURE_CURRENCY_GROWTH = 1.45

# =============================================================================
# Character Creator
# =============================================================================

STARTING_CURRENCY = 200
"""Currency a new character may spend on equipment."""

ARCHETYPE_FEAT_QUOTA = {
    "power": 1,
    "powered-martial": 2,
    "martial": 3,
}
"""Archetype feats a new character should pick, by archetype category."""

# =============================================================================
# Skill Encounters
# =============================================================================

BASE_DIFFICULTY_SCORE = 10
"""DS before adding half the party level."""

ENCOUNTER_MARGIN_BAND = 5
"""Each full band of this size beyond the DS adds one success or failure."""


__all__ = [
    "SKILL_VALUE_CAP",
    "BASE_SKILL_PAST_CAP_COST",
    "SUB_SKILL_PAST_CAP_COST",
    "SKILL_STEP_COST",
    "PROFICIENCY_COST",
    "SKILL_DECREASE_REFUND",
    "DEFENSE_INCREASE_COST",
    "DEFENSE_PURCHASE_MAX",
    "FREE_SKILL_POINT_SENTINEL",
    "CHARACTER_SKILL_POINTS_PER_LEVEL",
    "CREATURE_BASE_SKILL_POINTS",
    "CREATURE_SKILL_POINTS_PER_LEVEL",
    "BASE_ABILITY_POINTS",
    "ABILITY_POINTS_PER_3_LEVELS",
    "ABILITY_MIN",
    "ABILITY_MAX_STARTING",
    "ABILITY_MAX_ABSOLUTE",
    "ABILITY_COST_INCREASE_THRESHOLD",
    "CHARACTER_BASE_TRAINING_POINTS",
    "CHARACTER_TP_PER_LEVEL",
    "CREATURE_BASE_TRAINING_POINTS",
    "CREATURE_TP_PER_LEVEL",
    "CHARACTER_BASE_HEALTH_ENERGY",
    "CHARACTER_HEALTH_ENERGY_PER_LEVEL",
    "CREATURE_BASE_HEALTH_ENERGY",
    "CREATURE_HEALTH_ENERGY_PER_LEVEL",
    "BASE_PROFICIENCY",
    "PROFICIENCY_PER_5_LEVELS",
    "CREATURE_BASE_CURRENCY",
    "CREATURE_CURRENCY_GROWTH",
    "STARTING_CURRENCY",
    "ARCHETYPE_FEAT_QUOTA",
    "BASE_DIFFICULTY_SCORE",
    "ENCOUNTER_MARGIN_BAND",
]
