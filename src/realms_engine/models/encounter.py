"""Pydantic V2 schemas for skill encounters.

A skill encounter has a difficulty score (DS), a list of participants each
with at most one recorded roll, and running success/failure totals. The
models only hold state; ``realms_engine.engine.encounter`` computes new
states from them.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field


class SkillParticipant(BaseModel):
    """A participant in a skill encounter.

    Attributes:
        id: Participant id, unique within the encounter.
        name: Display name.
        has_rolled: Whether a roll has been recorded.
        roll_value: The recorded raw roll.
        rm_bonus: Bonus granted by the roll master, added to the roll.
        success_count: Successes from the recorded roll.
        failure_count: Failures from the recorded roll.
        is_helping: Helpers assist another participant and contribute
            nothing to the running totals.
        skill_used: Skill id the participant rolled.
        source_id: Character or creature id the participant came from.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    name: str = ""
    has_rolled: bool = Field(
        default=False,
        validation_alias=AliasChoices("has_rolled", "hasRolled"),
    )
    roll_value: int | None = Field(
        default=None,
        validation_alias=AliasChoices("roll_value", "rollValue"),
    )
    rm_bonus: int = Field(default=0, validation_alias=AliasChoices("rm_bonus", "rmBonus"))
    success_count: int = Field(
        default=0,
        validation_alias=AliasChoices("success_count", "successCount"),
    )
    failure_count: int = Field(
        default=0,
        validation_alias=AliasChoices("failure_count", "failureCount"),
    )
    is_helping: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_helping", "isHelping"),
    )
    skill_used: str | None = Field(
        default=None,
        validation_alias=AliasChoices("skill_used", "skillUsed"),
    )
    source_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("source_id", "sourceId"),
    )

    @property
    def counts_toward_totals(self) -> bool:
        return self.has_rolled and not self.is_helping

    @property
    def is_success(self) -> bool:
        return self.success_count > 0


class SkillEncounterState(BaseModel):
    """State of a skill encounter.

    Attributes:
        difficulty_score: The DS every roll is compared against.
        required_successes: Successes needed to win the encounter.
        required_failures: Failures that lose the encounter (0 = unset).
        participants: Participants in join order.
        current_successes: Running total of successes from rolls.
        current_failures: Running total of failures from rolls.
        additional_successes: Successes granted directly by the roll master.
        additional_failures: Failures imposed directly by the roll master.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    difficulty_score: int = Field(
        default=10,
        validation_alias=AliasChoices("difficulty_score", "difficultyScore"),
    )
    required_successes: Annotated[int, Field(ge=0)] = Field(
        default=1,
        validation_alias=AliasChoices("required_successes", "requiredSuccesses"),
    )
    required_failures: Annotated[int, Field(ge=0)] = Field(
        default=0,
        validation_alias=AliasChoices("required_failures", "requiredFailures"),
    )
    participants: list[SkillParticipant] = Field(default_factory=list)
    current_successes: int = Field(
        default=0,
        validation_alias=AliasChoices("current_successes", "currentSuccesses"),
    )
    current_failures: int = Field(
        default=0,
        validation_alias=AliasChoices("current_failures", "currentFailures"),
    )
    additional_successes: Annotated[int, Field(ge=0)] = Field(
        default=0,
        validation_alias=AliasChoices("additional_successes", "additionalSuccesses"),
    )
    additional_failures: Annotated[int, Field(ge=0)] = Field(
        default=0,
        validation_alias=AliasChoices("additional_failures", "additionalFailures"),
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def net_successes(self) -> int:
        """Successes minus failures, including roll-master adjustments.

        Returns:
            The signed net result.
        """
        return (self.current_successes + self.additional_successes) - (
            self.current_failures + self.additional_failures
        )

    def find_participant(self, participant_id: str) -> SkillParticipant | None:
        for participant in self.participants:
            if participant.id == participant_id:
                return participant
        return None


__all__ = [
    "SkillParticipant",
    "SkillEncounterState",
]
