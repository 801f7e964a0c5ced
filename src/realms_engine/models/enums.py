"""Enumeration types for the rules engine.

These enums are the vocabulary shared by the models and the rule
functions: entity kinds, wizard steps, abilities, defenses, archetypes
and issue severities.
"""

from __future__ import annotations

from enum import StrEnum


class EntityKind(StrEnum):
    """Kind of entity a budget is computed for.

    Characters and creatures follow different skill-point, training-point
    and health-energy progressions.
    """

    CHARACTER = "character"
    CREATURE = "creature"


class Severity(StrEnum):
    """Severity of a validation issue.

    Warnings mark an incomplete but savable build; errors mark an illegal
    one that should block finalizing.
    """

    WARNING = "warning"
    ERROR = "error"


class CreatorStep(StrEnum):
    """Steps of the character creator, in wizard order."""

    ARCHETYPE = "archetype"
    SPECIES = "species"
    ANCESTRY = "ancestry"
    ABILITIES = "abilities"
    SKILLS = "skills"
    FEATS = "feats"
    EQUIPMENT = "equipment"
    POWERS = "powers"
    FINALIZE = "finalize"


class Ability(StrEnum):
    """The six ability scores."""

    STRENGTH = "strength"
    VITALITY = "vitality"
    AGILITY = "agility"
    ACUITY = "acuity"
    INTELLIGENCE = "intelligence"
    CHARISMA = "charisma"


class Defense(StrEnum):
    """The six defenses, each driven by one ability."""

    MIGHT = "might"
    FORTITUDE = "fortitude"
    REFLEX = "reflex"
    DISCERNMENT = "discernment"
    MENTAL_FORTITUDE = "mental_fortitude"
    RESOLVE = "resolve"

    @property
    def ability(self) -> Ability:
        """Get the ability that contributes to this defense.

        Returns:
            The linked Ability.
        """
        defense_abilities: dict[Defense, Ability] = {
            Defense.MIGHT: Ability.STRENGTH,
            Defense.FORTITUDE: Ability.VITALITY,
            Defense.REFLEX: Ability.AGILITY,
            Defense.DISCERNMENT: Ability.ACUITY,
            Defense.MENTAL_FORTITUDE: Ability.INTELLIGENCE,
            Defense.RESOLVE: Ability.CHARISMA,
        }
        return defense_abilities[self]

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


class ArchetypeCategory(StrEnum):
    """Archetype categories, which set the archetype feat quota."""

    POWER = "power"
    POWERED_MARTIAL = "powered-martial"
    MARTIAL = "martial"


class FeatType(StrEnum):
    """Where a selected feat comes from."""

    ARCHETYPE = "archetype"
    CHARACTER = "character"


__all__ = [
    "EntityKind",
    "Severity",
    "CreatorStep",
    "Ability",
    "Defense",
    "ArchetypeCategory",
    "FeatType",
]
