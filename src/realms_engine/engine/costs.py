"""Cost model: the price of a single allocation step.

Every function here is a pure price-table lookup. Species exemptions are
deliberately absent: the first point of a species-granted skill is made
free by the spend aggregator in ``realms_engine.engine.spending``.

Example:
    >>> skill_increase_cost(2, is_sub_skill=False)
    1
    >>> skill_increase_cost(3, is_sub_skill=False)
    3
    >>> skill_increase_cost(3, is_sub_skill=True)
    2
"""

from __future__ import annotations

from realms_engine.core.constants import (
    ABILITY_COST_INCREASE_THRESHOLD,
    ABILITY_MAX_ABSOLUTE,
    ABILITY_MAX_STARTING,
    ABILITY_MIN,
    BASE_SKILL_PAST_CAP_COST,
    DEFENSE_INCREASE_COST,
    PROFICIENCY_COST,
    SKILL_DECREASE_REFUND,
    SKILL_STEP_COST,
    SKILL_VALUE_CAP,
    SUB_SKILL_PAST_CAP_COST,
)


# =============================================================================
# Skill Prices
# =============================================================================


def skill_increase_cost(current_value: int, is_sub_skill: bool) -> int:
    """Cost to raise a skill's value by one step.

    Below the soft cap every step costs 1. At or above it a base skill
    costs 3 per step and a sub-skill 2.

    Args:
        current_value: The skill's value before the increase.
        is_sub_skill: Whether the skill is a sub-skill.

    Returns:
        Skill points the step costs.
    """
    if current_value < SKILL_VALUE_CAP:
        return SKILL_STEP_COST
    return SUB_SKILL_PAST_CAP_COST if is_sub_skill else BASE_SKILL_PAST_CAP_COST


def proficiency_cost() -> int:
    """Cost to gain proficiency in a skill.

    For a sub-skill the same point also grants its first value.
    """
    return PROFICIENCY_COST


def skill_decrease_refund(current_value: int) -> int:
    """Refund for lowering a skill by one step.

    The refund is flat, including the step from 1 to 0 that removes
    proficiency. Above the soft cap this does not mirror
    ``skill_increase_cost``: raising 3 to 4 costs 3 (or 2), lowering 4 to 3
    refunds 1.
    """
    return SKILL_DECREASE_REFUND


def defense_increase_cost() -> int:
    """Cost of one purchased defense bonus point, independent of its value."""
    return DEFENSE_INCREASE_COST


# =============================================================================
# Skill Legality
# =============================================================================


def can_increase_skill_value(
    current_value: int,
    is_proficient: bool,
    is_sub_skill: bool,
    base_skill_proficient: bool,
    available_points: int,
    is_species_skill: bool,
) -> bool:
    """Whether the allocation editor should allow raising a skill.

    A non-proficient skill spends its first point on proficiency; a
    sub-skill can only do so once its base skill is proficient. Species
    skills are always proficient.

    Args:
        current_value: The skill's current value.
        is_proficient: Whether the skill is already proficient.
        is_sub_skill: Whether the skill is a sub-skill.
        base_skill_proficient: Whether the sub-skill's base is proficient.
        available_points: Unspent skill points.
        is_species_skill: Whether the species grants the skill.

    Returns:
        True if the step is affordable and legal.
    """
    if is_species_skill:
        return available_points >= skill_increase_cost(current_value, is_sub_skill)
    if not is_proficient:
        if is_sub_skill and not base_skill_proficient:
            return False
        return available_points >= proficiency_cost()
    return available_points >= skill_increase_cost(current_value, is_sub_skill)


def can_decrease_skill_value(current_value: int, is_species_skill: bool) -> bool:
    """Whether a skill may be lowered; species skills never drop below 1."""
    if current_value <= 0:
        return False
    if is_species_skill:
        return current_value > 1
    return True


def can_increase_defense(
    current_defense_bonus: int,
    level: int,
    ability_bonus: int,
    available_points: int,
) -> bool:
    """Whether another defense point may be bought.

    The purchased plus ability-derived bonus must stay within the level.

    Args:
        current_defense_bonus: Bonus already purchased.
        level: Character level.
        ability_bonus: Bonus from the defense's linked ability.
        available_points: Unspent skill points.

    Returns:
        True if the purchase is affordable and stays within the cap.
    """
    if current_defense_bonus + ability_bonus >= level:
        return False
    return available_points >= defense_increase_cost()


# =============================================================================
# Ability Prices
# =============================================================================


def ability_increase_cost(current_value: int) -> int:
    """Cost to raise an ability score by one (2 at or above 4, else 1)."""
    if current_value >= ABILITY_COST_INCREASE_THRESHOLD:
        return 2
    return 1


def can_increase_ability(
    current_value: int,
    available_points: int,
    is_creation: bool = True,
) -> bool:
    """Whether an ability may be raised.

    Args:
        current_value: The ability's current score.
        available_points: Unspent ability points.
        is_creation: Creation caps abilities lower than later levelling.

    Returns:
        True if under the cap and affordable.
    """
    maximum = ABILITY_MAX_STARTING if is_creation else ABILITY_MAX_ABSOLUTE
    if current_value >= maximum:
        return False
    return available_points >= ability_increase_cost(current_value)


def can_decrease_ability(current_value: int) -> bool:
    return current_value > ABILITY_MIN


__all__ = [
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
]
