"""Spend aggregator: total skill points spent by an allocation.

This is the single place that prices a whole skill allocation. The wizard
step validation, the finalize review and the live character sheet all go
through ``skill_points_spent`` so they cannot drift apart.

Pricing uses the cost model only. A skill at value ``v`` pays one
proficiency point and then ``skill_increase_cost(s)`` for every step
``s`` from 1 up to ``v - 1``. Steps below the cap and steps past it each
have a flat price, so the sum is computed in closed form. For a sub-skill
the proficiency point also buys its first value. Species-granted skills
skip the proficiency point. Negative or non-finite values contribute
nothing, so a transient invalid editor state never breaks validation.

Example:
    >>> skill_cost(4, is_sub_skill=False)
    6
    >>> skill_cost(2, is_sub_skill=True)
    2
    >>> skill_cost(1, is_sub_skill=False, is_species_skill=True)
    0
"""

from __future__ import annotations

import math
from collections.abc import Collection, Mapping
from dataclasses import dataclass

from realms_engine.core.constants import FREE_SKILL_POINT_SENTINEL, SKILL_VALUE_CAP
from realms_engine.core.logging import get_logger
from realms_engine.engine.budget import total_skill_points
from realms_engine.engine.costs import (
    defense_increase_cost,
    proficiency_cost,
    skill_increase_cost,
)
from realms_engine.engine.derived import coerce_defense_allocation
from realms_engine.models.character import DefenseAllocation
from realms_engine.models.codex import SkillMeta
from realms_engine.models.enums import EntityKind


logger = get_logger(__name__)

_DEFAULT_META = SkillMeta()


def allocation_value(value: int | float | None) -> int:
    """Clamp a raw allocation value to a non-negative integer."""
    if value is None:
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return max(0, math.floor(value))


def skill_cost(value: int, is_sub_skill: bool, is_species_skill: bool = False) -> int:
    """Skill points a single skill at ``value`` has cost in total.

    Args:
        value: Allocated value (0 = not proficient).
        is_sub_skill: Whether the skill is a sub-skill.
        is_species_skill: Whether the species grants the first point.

    Returns:
        Total points spent on the skill.
    """
    steps = allocation_value(value)
    if steps == 0:
        return 0
    below_cap = min(steps, SKILL_VALUE_CAP) - 1
    past_cap = max(0, steps - SKILL_VALUE_CAP)
    spent = (
        below_cap * skill_increase_cost(0, is_sub_skill)
        + past_cap * skill_increase_cost(SKILL_VALUE_CAP, is_sub_skill)
    )
    if is_species_skill:
        return spent
    return proficiency_cost() + spent


def skill_costs(
    allocations: Mapping[str, int],
    species_skill_ids: Collection[str] = (),
    skill_meta: Mapping[str, SkillMeta] | None = None,
) -> dict[str, int]:
    """Per-skill cost of an allocation.

    Skills missing from ``skill_meta`` are priced as base skills.

    Returns:
        Skill id to points spent, for every allocated skill.
    """
    meta = skill_meta or {}
    species = set(species_skill_ids)
    return {
        skill_id: skill_cost(
            value,
            is_sub_skill=meta.get(skill_id, _DEFAULT_META).is_sub_skill,
            is_species_skill=skill_id in species,
        )
        for skill_id, value in allocations.items()
    }


def defense_points_spent(defenses: DefenseAllocation | Mapping[str, int] | None) -> int:
    """Skill points spent on purchased defense bonuses."""
    allocation = coerce_defense_allocation(defenses)
    purchased = sum(allocation_value(value) for value in allocation.as_dict().values())
    return purchased * defense_increase_cost()


def skill_points_spent(
    allocations: Mapping[str, int],
    species_skill_ids: Collection[str] = (),
    skill_meta: Mapping[str, SkillMeta] | None = None,
    defenses: DefenseAllocation | Mapping[str, int] | None = None,
) -> int:
    """Total skill points spent on skills and defenses.

    Args:
        allocations: Skill id to allocated value.
        species_skill_ids: Skills the species grants for free.
        skill_meta: Skill id to metadata from the codex.
        defenses: Purchased defense bonuses.

    Returns:
        Total points spent; never negative.
    """
    skills_total = sum(skill_costs(allocations, species_skill_ids, skill_meta).values())
    return skills_total + defense_points_spent(defenses)


@dataclass(frozen=True)
class SkillPointSummary:
    """Skill point budget versus spend.

    Attributes:
        total: Points available, including any species free point.
        spent: Points spent on skills and defenses.
        remaining: ``total - spent``; negative when overspent.
        free_point_bonus: Extra points granted by the species sentinel.
    """

    total: int
    spent: int
    remaining: int
    free_point_bonus: int = 0

    @property
    def is_overspent(self) -> bool:
        return self.remaining < 0

    @property
    def has_unspent(self) -> bool:
        return self.remaining > 0


def free_skill_point_bonus(species_skill_ids: Collection[str]) -> int:
    """One extra skill point when the species lists the free-point sentinel."""
    return 1 if FREE_SKILL_POINT_SENTINEL in species_skill_ids else 0


def skill_point_summary(
    level: int | float,
    kind: EntityKind,
    allocations: Mapping[str, int],
    species_skill_ids: Collection[str] = (),
    skill_meta: Mapping[str, SkillMeta] | None = None,
    defenses: DefenseAllocation | Mapping[str, int] | None = None,
) -> SkillPointSummary:
    """Compare the skill point budget for a level against an allocation.

    Example:
        >>> summary = skill_point_summary(5, EntityKind.CHARACTER, {"athletics": 4})
        >>> (summary.total, summary.spent, summary.remaining)
        (15, 6, 9)
    """
    bonus = free_skill_point_bonus(species_skill_ids)
    total = total_skill_points(level, kind) + bonus
    spent = skill_points_spent(allocations, species_skill_ids, skill_meta, defenses)
    summary = SkillPointSummary(
        total=total,
        spent=spent,
        remaining=total - spent,
        free_point_bonus=bonus,
    )
    logger.debug(
        "Skill points summarised",
        level=level,
        kind=str(kind),
        total=summary.total,
        spent=summary.spent,
        remaining=summary.remaining,
    )
    return summary


__all__ = [
    "allocation_value",
    "skill_cost",
    "skill_costs",
    "defense_points_spent",
    "skill_points_spent",
    "SkillPointSummary",
    "free_skill_point_bonus",
    "skill_point_summary",
]
