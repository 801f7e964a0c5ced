"""Character build economy and encounter resolution.

Every function in this package is pure and synchronous: it reads plain
data, returns plain data, and never mutates its inputs.

Components:
    costs: Price of a single allocation step.
    budget: Total points and pools available at a level.
    spending: Total skill points spent by an allocation.
    validation: Severity-tagged issues per wizard step and per draft.
    encounter: Skill roll resolution and tracker helpers.
    derived: Defense and skill bonuses.
    dice: d20-backed dice rolling for the tracker.
"""

from __future__ import annotations

from realms_engine.engine.budget import (
    LevelDifference,
    Progression,
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
from realms_engine.engine.costs import (
    ability_increase_cost,
    can_decrease_ability,
    can_decrease_skill_value,
    can_increase_ability,
    can_increase_defense,
    can_increase_skill_value,
    defense_increase_cost,
    proficiency_cost,
    skill_decrease_refund,
    skill_increase_cost,
)
from realms_engine.engine.derived import defense_bonuses, skill_bonus
from realms_engine.engine.dice import DiceResult, DiceRoller
from realms_engine.engine.encounter import (
    SkillRollResult,
    add_participant,
    adjust_additional,
    clear_roll,
    default_difficulty_score,
    default_required_successes,
    new_skill_encounter,
    record_roll,
    remove_participant,
    resolve_skill_roll,
    roll_for_participant,
    set_difficulty_score,
    set_helping,
    set_rm_bonus,
)
from realms_engine.engine.spending import (
    SkillPointSummary,
    defense_points_spent,
    skill_cost,
    skill_costs,
    skill_point_summary,
    skill_points_spent,
)
from realms_engine.engine.validation import (
    ValidationContext,
    all_issues,
    is_finalizable,
    issues_for_step,
)


__all__ = [
    # Costs
    "skill_increase_cost",
    "proficiency_cost",
    "skill_decrease_refund",
    "defense_increase_cost",
    "can_increase_skill_value",
    "can_decrease_skill_value",
    "can_increase_defense",
    "ability_increase_cost",
    "can_increase_ability",
    "can_decrease_ability",
    # Budget
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
    # Spending
    "skill_cost",
    "skill_costs",
    "defense_points_spent",
    "skill_points_spent",
    "SkillPointSummary",
    "skill_point_summary",
    # Validation
    "ValidationContext",
    "issues_for_step",
    "all_issues",
    "is_finalizable",
    # Derived
    "defense_bonuses",
    "skill_bonus",
    # Encounter
    "SkillRollResult",
    "resolve_skill_roll",
    "default_difficulty_score",
    "default_required_successes",
    "new_skill_encounter",
    "add_participant",
    "remove_participant",
    "record_roll",
    "clear_roll",
    "set_rm_bonus",
    "set_helping",
    "set_difficulty_score",
    "adjust_additional",
    "roll_for_participant",
    # Dice
    "DiceResult",
    "DiceRoller",
]
