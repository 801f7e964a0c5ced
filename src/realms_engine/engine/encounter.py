"""Skill encounter resolution and tracker helpers.

``resolve_skill_roll`` is the whole rule: a roll at or above the DS scores
``1 + (roll - DS) // 5`` successes, a roll below it ``1 + (DS - roll) // 5``
failures. It is total over integers.

The tracker helpers below it never mutate a state. Each returns a new
``SkillEncounterState`` whose running totals are recomputed from the
participants, so totals cannot drift from the recorded rolls.

Example:
    >>> resolve_skill_roll(15, 10)
    SkillRollResult(successes=2, failures=0)
    >>> resolve_skill_roll(9, 10)
    SkillRollResult(successes=0, failures=1)
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from realms_engine.core.constants import BASE_DIFFICULTY_SCORE, ENCOUNTER_MARGIN_BAND
from realms_engine.core.exceptions import EncounterError
from realms_engine.core.logging import get_logger
from realms_engine.engine.dice import DiceRoller
from realms_engine.models.encounter import SkillEncounterState, SkillParticipant


logger = get_logger(__name__)


@dataclass(frozen=True)
class SkillRollResult:
    """Successes and failures produced by one roll.

    Exactly one of the two counts is non-zero.
    """

    successes: int
    failures: int

    @property
    def is_success(self) -> bool:
        return self.successes > 0


def resolve_skill_roll(roll: int, difficulty_score: int) -> SkillRollResult:
    """Convert one roll against a DS into successes or failures.

    Args:
        roll: The effective roll (raw roll plus any bonus).
        difficulty_score: The encounter's DS.

    Returns:
        SkillRollResult with at least one success or one failure.
    """
    if roll >= difficulty_score:
        return SkillRollResult(
            successes=1 + (roll - difficulty_score) // ENCOUNTER_MARGIN_BAND,
            failures=0,
        )
    return SkillRollResult(
        successes=0,
        failures=1 + (difficulty_score - roll) // ENCOUNTER_MARGIN_BAND,
    )


def default_difficulty_score(
    party_level: int | float,
    base: int = BASE_DIFFICULTY_SCORE,
) -> int:
    """Suggested DS: base plus half the party level, rounded down."""
    return base + math.floor(max(0, party_level) / 2)


def default_required_successes(participant_count: int) -> int:
    """Suggested success target: one more than the number of participants."""
    return max(0, participant_count) + 1


# =============================================================================
# Tracker Helpers
# =============================================================================


def _resolved(participant: SkillParticipant, difficulty_score: int) -> SkillParticipant:
    if not participant.has_rolled or participant.roll_value is None:
        return participant.model_copy(update={"success_count": 0, "failure_count": 0})
    result = resolve_skill_roll(participant.roll_value + participant.rm_bonus, difficulty_score)
    return participant.model_copy(
        update={"success_count": result.successes, "failure_count": result.failures}
    )


def _with_participants(
    state: SkillEncounterState,
    participants: Iterable[SkillParticipant],
    difficulty_score: int | None = None,
) -> SkillEncounterState:
    ds = state.difficulty_score if difficulty_score is None else difficulty_score
    resolved = [_resolved(participant, ds) for participant in participants]
    counted = [participant for participant in resolved if participant.counts_toward_totals]
    return state.model_copy(
        update={
            "difficulty_score": ds,
            "participants": resolved,
            "current_successes": sum(p.success_count for p in counted),
            "current_failures": sum(p.failure_count for p in counted),
        }
    )


def _require(state: SkillEncounterState, participant_id: str) -> SkillParticipant:
    participant = state.find_participant(participant_id)
    if participant is None:
        raise EncounterError(
            "Participant is not part of this encounter",
            participant_id=participant_id,
        )
    return participant


def _replace(
    state: SkillEncounterState,
    participant_id: str,
    **changes: object,
) -> SkillEncounterState:
    _require(state, participant_id)
    participants = [
        participant.model_copy(update=changes) if participant.id == participant_id else participant
        for participant in state.participants
    ]
    return _with_participants(state, participants)


def new_skill_encounter(
    party_level: int | float,
    participants: Iterable[SkillParticipant] = (),
    *,
    required_failures: int = 0,
    base_difficulty_score: int = BASE_DIFFICULTY_SCORE,
) -> SkillEncounterState:
    """Start a skill encounter with the suggested DS and success target."""
    roster = list(participants)
    return SkillEncounterState(
        difficulty_score=default_difficulty_score(party_level, base_difficulty_score),
        required_successes=default_required_successes(len(roster)),
        required_failures=required_failures,
        participants=roster,
    )


def add_participant(
    state: SkillEncounterState,
    participant: SkillParticipant,
) -> SkillEncounterState:
    """Add a participant; ids must be unique within the encounter.

    Raises:
        EncounterError: If the id is already taken.
    """
    if state.find_participant(participant.id) is not None:
        raise EncounterError("Participant already joined", participant_id=participant.id)
    return _with_participants(state, [*state.participants, participant])


def remove_participant(state: SkillEncounterState, participant_id: str) -> SkillEncounterState:
    _require(state, participant_id)
    remaining = [p for p in state.participants if p.id != participant_id]
    return _with_participants(state, remaining)


def record_roll(
    state: SkillEncounterState,
    participant_id: str,
    roll_value: int,
    rm_bonus: int | None = None,
) -> SkillEncounterState:
    """Record (or re-record) a participant's roll.

    Args:
        state: Current encounter state.
        participant_id: Who rolled.
        roll_value: The raw roll.
        rm_bonus: Roll-master bonus; keeps the existing one when None.

    Returns:
        The new state with totals recomputed.

    Raises:
        EncounterError: If the participant is unknown.
    """
    participant = _require(state, participant_id)
    bonus = participant.rm_bonus if rm_bonus is None else rm_bonus
    new_state = _replace(
        state,
        participant_id,
        roll_value=roll_value,
        rm_bonus=bonus,
        has_rolled=True,
    )
    logger.info(
        "Skill roll recorded",
        participant_id=participant_id,
        roll=roll_value,
        rm_bonus=bonus,
        difficulty_score=state.difficulty_score,
    )
    return new_state


def clear_roll(state: SkillEncounterState, participant_id: str) -> SkillEncounterState:
    return _replace(state, participant_id, roll_value=None, has_rolled=False)


def set_rm_bonus(
    state: SkillEncounterState,
    participant_id: str,
    rm_bonus: int,
) -> SkillEncounterState:
    return _replace(state, participant_id, rm_bonus=rm_bonus)


def set_helping(
    state: SkillEncounterState,
    participant_id: str,
    is_helping: bool,
) -> SkillEncounterState:
    """Mark a participant as helping; helpers add nothing to the totals."""
    return _replace(state, participant_id, is_helping=is_helping)


def set_difficulty_score(state: SkillEncounterState, difficulty_score: int) -> SkillEncounterState:
    """Change the DS and re-resolve every recorded roll against it."""
    return _with_participants(state, state.participants, difficulty_score)


def adjust_additional(
    state: SkillEncounterState,
    *,
    successes: int = 0,
    failures: int = 0,
) -> SkillEncounterState:
    """Add or remove roll-master successes and failures, never below zero."""
    return state.model_copy(
        update={
            "additional_successes": max(0, state.additional_successes + successes),
            "additional_failures": max(0, state.additional_failures + failures),
        }
    )


def roll_for_participant(
    state: SkillEncounterState,
    participant_id: str,
    bonus: int = 0,
    roller: DiceRoller | None = None,
) -> SkillEncounterState:
    """Roll a skill check for a participant and record the result.

    The recorded value is the check total (dice plus ``bonus``).
    """
    _require(state, participant_id)
    dice = roller or DiceRoller()
    result = dice.roll_skill_check(bonus)
    return record_roll(state, participant_id, result.total)


__all__ = [
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
]
