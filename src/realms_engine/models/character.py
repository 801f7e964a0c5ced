"""Pydantic V2 schemas for character drafts.

A draft is the plain data object the character creator mutates step by
step. It is created when the wizard starts, persisted only on explicit
save, and discarded on cancel. The rule engine reads drafts; it never
mutates or stores them.

Drafts arrive straight from a live editor, so the models are lenient:
unknown keys are ignored and numeric fields are not range-checked. Half-typed
numbers never fail validation: null, blank and non-finite values fall back to
the field default, and fractional values are floored.
"""

from __future__ import annotations

import math
from typing import Annotated

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from realms_engine.models.enums import (
    ArchetypeCategory,
    Defense,
    EntityKind,
    FeatType,
)


def _editor_number(value: object, default: int) -> object:
    """Coerce a raw editor value towards an integer.

    None, blank strings and non-finite floats become ``default``; other
    floats are floored. Anything else is left for pydantic to parse.
    """
    if value is None:
        return default
    if isinstance(value, str) and not value.strip():
        return default
    if isinstance(value, float):
        return math.floor(value) if math.isfinite(value) else default
    return value


def _editor_numbers(values: object) -> object:
    if isinstance(values, dict):
        return {key: _editor_number(value, 0) for key, value in values.items()}
    if values is None:
        return {}
    return values


class DefenseAllocation(BaseModel):
    """Defense bonuses purchased with skill points.

    Each point costs a fixed number of skill points. The purchased bonus
    plus the ability-derived bonus must not exceed the character's level.

    Attributes:
        might: Purchased Might bonus.
        fortitude: Purchased Fortitude bonus.
        reflex: Purchased Reflex bonus.
        discernment: Purchased Discernment bonus.
        mental_fortitude: Purchased Mental Fortitude bonus.
        resolve: Purchased Resolve bonus.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    might: int = 0
    fortitude: int = 0
    reflex: int = 0
    discernment: int = 0
    mental_fortitude: int = Field(
        default=0,
        validation_alias=AliasChoices("mental_fortitude", "mentalFortitude"),
    )
    resolve: int = 0

    @field_validator("*", mode="before")
    @classmethod
    def coerce_editor_numbers(cls, value: object) -> object:
        return _editor_number(value, 0)

    def get(self, defense: Defense) -> int:
        """Get the purchased bonus for a defense.

        Args:
            defense: The defense to look up.

        Returns:
            The purchased bonus as stored (may be negative mid-edit).
        """
        return getattr(self, defense.value)

    def as_dict(self) -> dict[Defense, int]:
        return {defense: self.get(defense) for defense in Defense}


class ArchetypeSelection(BaseModel):
    """The chosen archetype.

    Attributes:
        id: Codex id of the archetype, if any.
        type: Archetype category; unset until the player picks one.
        power_ability: Ability linked to powers.
        martial_ability: Ability linked to martial techniques.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str | None = None
    type: ArchetypeCategory | None = None
    power_ability: str | None = Field(
        default=None,
        validation_alias=AliasChoices("power_ability", "pow_abil"),
    )
    martial_ability: str | None = Field(
        default=None,
        validation_alias=AliasChoices("martial_ability", "mart_abil"),
    )


class SpeciesSelection(BaseModel):
    """The chosen species and its selected ancestry traits.

    Attributes:
        id: Codex id of the species.
        name: Species display name, used as a lookup fallback.
        selected_traits: Ids of the ancestry traits the player picked.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str | None = None
    name: str | None = None
    selected_traits: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("selected_traits", "selectedTraits"),
    )

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class FeatSelection(BaseModel):
    """A feat picked during creation."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str = ""
    type: FeatType | None = None


class EquipmentItem(BaseModel):
    """An item bought from the starting purse."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str = ""
    cost: int = 0
    quantity: Annotated[int, Field(ge=0)] = 1

    @field_validator("cost", mode="before")
    @classmethod
    def coerce_cost(cls, value: object) -> object:
        return _editor_number(value, 0)

    @field_validator("quantity", mode="before")
    @classmethod
    def coerce_quantity(cls, value: object) -> object:
        value = _editor_number(value, 1)
        if isinstance(value, int) and value < 0:
            return 0
        return value


class CharacterDraft(BaseModel):
    """A character under construction in the creator wizard.

    Attributes:
        name: Character name; required only when finalizing.
        level: Character level, floored; a missing or non-finite level
            becomes 1. The engine also clamps it to at least 1.
        entity_kind: Character or creature.
        archetype: Chosen archetype, if any.
        species: Chosen species and ancestry traits, if any.
        abilities: Ability name to allocated score.
        skills: Skill id to allocated value (0 = not proficient).
        defense_vals: Defense bonuses purchased with skill points.
        feats: Selected archetype and character feats.
        training_points_spent: Training points spent on equipment.
        equipment: Items bought with starting currency. The editor's
            ``{"items": [...]}`` or ``{"inventory": [...]}`` wrapper is unwrapped.
        health_points: Pool points allocated to health.
        energy_points: Pool points allocated to energy.

    Example:
        >>> draft = CharacterDraft(name="Ysolde", level=3, skills={"athletics": 2})
        >>> draft.level
        3
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        validate_assignment=True,
    )

    name: str = ""
    level: int = 1
    entity_kind: EntityKind = Field(
        default=EntityKind.CHARACTER,
        validation_alias=AliasChoices("entity_kind", "entityKind"),
    )
    archetype: ArchetypeSelection | None = None
    species: SpeciesSelection | None = Field(
        default=None,
        validation_alias=AliasChoices("species", "ancestry"),
    )
    abilities: dict[str, int] = Field(default_factory=dict)
    skills: dict[str, int] = Field(default_factory=dict)
    defense_vals: DefenseAllocation = Field(
        default_factory=DefenseAllocation,
        validation_alias=AliasChoices("defense_vals", "defenseVals", "defenseSkills"),
    )
    feats: list[FeatSelection] = Field(default_factory=list)
    training_points_spent: int = Field(
        default=0,
        validation_alias=AliasChoices("training_points_spent", "trainingPointsSpent"),
    )
    equipment: list[EquipmentItem] = Field(default_factory=list)
    health_points: int = Field(
        default=0,
        validation_alias=AliasChoices("health_points", "healthPoints"),
    )
    energy_points: int = Field(
        default=0,
        validation_alias=AliasChoices("energy_points", "energyPoints"),
    )

    @field_validator("level", mode="before")
    @classmethod
    def coerce_level(cls, value: object) -> object:
        return _editor_number(value, 1)

    @field_validator("training_points_spent", "health_points", "energy_points", mode="before")
    @classmethod
    def coerce_points(cls, value: object) -> object:
        return _editor_number(value, 0)

    @field_validator("abilities", "skills", mode="before")
    @classmethod
    def coerce_allocations(cls, value: object) -> object:
        return _editor_numbers(value)

    @field_validator("defense_vals", mode="before")
    @classmethod
    def coerce_defenses(cls, value: object) -> object:
        return {} if value is None else value

    @field_validator("feats", mode="before")
    @classmethod
    def coerce_feats(cls, value: object) -> object:
        return [] if value is None else value

    @field_validator("equipment", mode="before")
    @classmethod
    def unwrap_equipment(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, dict):
            return value.get("items") or value.get("inventory") or []
        return value

    @property
    def highest_ability(self) -> int:
        """Highest allocated ability score, never below 0.

        Returns:
            The highest ability value, or 0 when none is positive.
        """
        return max([0, *self.abilities.values()])

    def feats_of_type(self, feat_type: FeatType) -> list[FeatSelection]:
        return [feat for feat in self.feats if feat.type == feat_type]


__all__ = [
    "DefenseAllocation",
    "ArchetypeSelection",
    "SpeciesSelection",
    "FeatSelection",
    "EquipmentItem",
    "CharacterDraft",
]
