"""Codex snapshot schemas.

The codex is the shared content library (species, skills, ...). The
engine never fetches it; callers pass an already-fetched snapshot into
every call that needs one. Codex ids may be stored as integers upstream,
so every id is coerced to a string here.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_id(value: object) -> object:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


@dataclass(frozen=True)
class SkillMeta:
    """What the engine needs to know about a skill.

    Attributes:
        is_sub_skill: Whether the skill derives from a base skill.
        base_skill_id: Id of the base skill, when the codex names one.
    """

    is_sub_skill: bool = False
    base_skill_id: str | None = None


class SkillEntry(BaseModel):
    """A skill as listed in the codex.

    A skill with a ``base_skill_id`` is a sub-skill of that base skill.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str = ""
    base_skill_id: str | None = None

    @field_validator("id", "base_skill_id", mode="before")
    @classmethod
    def coerce_ids(cls, value: object) -> object:
        return _coerce_id(value)

    @property
    def is_sub_skill(self) -> bool:
        return self.base_skill_id is not None

    def to_meta(self) -> SkillMeta:
        return SkillMeta(is_sub_skill=self.is_sub_skill, base_skill_id=self.base_skill_id)


class SpeciesEntry(BaseModel):
    """A species as listed in the codex.

    Attributes:
        id: Codex id.
        name: Display name.
        skills: Ids of the skills the species grants for free. The id
            ``"0"`` is a sentinel granting one extra skill point instead.
        ancestry_traits: Ancestry trait ids, or None when the codex entry
            does not say.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str = ""
    skills: list[str] = Field(default_factory=list)
    ancestry_traits: list[str] | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: object) -> object:
        return _coerce_id(value)

    @field_validator("skills", "ancestry_traits", mode="before")
    @classmethod
    def coerce_id_list(cls, value: object) -> object:
        if isinstance(value, list):
            return [_coerce_id(item) for item in value]
        return value

    @property
    def skill_ids(self) -> frozenset[str]:
        return frozenset(self.skills)


class CodexSnapshot(BaseModel):
    """An already-fetched snapshot of the codex content the engine reads.

    Example:
        >>> codex = CodexSnapshot(
        ...     species=[{"id": "1", "name": "Elf", "skills": ["3", "0"]}],
        ...     skills=[{"id": "3", "name": "Stealth"}],
        ... )
        >>> codex.find_species(name="elf").id
        '1'
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    species: list[SpeciesEntry] = Field(default_factory=list)
    skills: list[SkillEntry] = Field(default_factory=list)

    def find_species(
        self,
        species_id: str | None = None,
        name: str | None = None,
    ) -> SpeciesEntry | None:
        """Find a species by id, falling back to a case-insensitive name match.

        Args:
            species_id: Codex id to look for.
            name: Display name to look for.

        Returns:
            The matching species, or None.
        """
        return find_species(self.species, species_id, name)

    def skill_meta(self) -> dict[str, SkillMeta]:
        return {skill.id: skill.to_meta() for skill in self.skills}


def find_species(
    species: list[SpeciesEntry] | tuple[SpeciesEntry, ...],
    species_id: str | None = None,
    name: str | None = None,
) -> SpeciesEntry | None:
    """Look up a species entry by id or case-insensitive name."""
    wanted_name = (name or "").lower()
    for entry in species:
        if species_id is not None and entry.id == species_id:
            return entry
        if wanted_name and entry.name.lower() == wanted_name:
            return entry
    return None


def build_skill_meta(skills: list[SkillEntry] | Mapping[str, SkillMeta] | None) -> dict[str, SkillMeta]:
    """Normalise codex skill data into a skill id to SkillMeta mapping.

    Args:
        skills: Codex skill entries, an existing mapping, or None.

    Returns:
        A new dictionary keyed by skill id.
    """
    if skills is None:
        return {}
    if isinstance(skills, Mapping):
        return dict(skills)
    return {skill.id: skill.to_meta() for skill in skills}


__all__ = [
    "SkillMeta",
    "SkillEntry",
    "SpeciesEntry",
    "CodexSnapshot",
    "find_species",
    "build_skill_meta",
]
