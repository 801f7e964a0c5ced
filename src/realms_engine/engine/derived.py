"""Derived stats: defense bonuses and skill bonuses.

Defense bonuses feed the defense cap check in the validation engine;
skill bonuses are what the live character sheet shows next to each skill.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping

from realms_engine.models.character import DefenseAllocation
from realms_engine.models.enums import Defense


def coerce_defense_allocation(
    defenses: DefenseAllocation | Mapping[str, int] | None,
) -> DefenseAllocation:
    """Accept a DefenseAllocation, a plain mapping, or None."""
    if defenses is None:
        return DefenseAllocation()
    if isinstance(defenses, DefenseAllocation):
        return defenses
    return DefenseAllocation.model_validate(dict(defenses))


def ability_defense_bonus(abilities: Mapping[str, int], defense: Defense) -> int:
    """Bonus a defense gets from its linked ability."""
    return abilities.get(defense.ability.value, 0) or 0


def defense_bonuses(
    abilities: Mapping[str, int],
    defenses: DefenseAllocation | Mapping[str, int] | None,
) -> dict[Defense, int]:
    """Total bonus per defense: linked ability plus purchased points.

    Args:
        abilities: Ability name to score.
        defenses: Purchased defense bonuses.

    Returns:
        Mapping of every defense to its total bonus.

    Example:
        >>> defense_bonuses({"agility": 2}, {"reflex": 1})[Defense.REFLEX]
        3
    """
    allocation = coerce_defense_allocation(defenses)
    return {
        defense: ability_defense_bonus(abilities, defense) + allocation.get(defense)
        for defense in Defense
    }


def highest_linked_ability(
    linked_abilities: str | Iterable[str] | None,
    abilities: Mapping[str, int],
) -> int:
    """Highest score among a skill's linked abilities.

    Codex entries list linked abilities either as a list or as a
    comma-separated string. Unknown ability names are ignored.

    Returns:
        The highest linked score, or 0 when none is known.
    """
    if not linked_abilities:
        return 0
    if isinstance(linked_abilities, str):
        names = [name.strip() for name in linked_abilities.split(",")]
    else:
        names = list(linked_abilities)
    scores = [abilities[name.lower()] for name in names if name.lower() in abilities]
    return max(scores) if scores else 0


def skill_bonus(
    linked_abilities: str | Iterable[str] | None,
    skill_value: int,
    abilities: Mapping[str, int],
    is_proficient: bool = True,
) -> int:
    """Bonus a character rolls with for a skill.

    Proficient: highest linked ability + skill value + 1. Unproficient:
    half the ability rounded up, or double it when it is negative.
    """
    ability = highest_linked_ability(linked_abilities, abilities)
    if is_proficient:
        return ability + skill_value + 1
    if ability < 0:
        return ability * 2
    return math.ceil(ability / 2)


__all__ = [
    "coerce_defense_allocation",
    "ability_defense_bonus",
    "defense_bonuses",
    "highest_linked_ability",
    "skill_bonus",
]
