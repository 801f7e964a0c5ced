"""Integration tests running a skill encounter end to end."""

from __future__ import annotations

from realms_engine.core.config import EncounterSettings
from realms_engine.engine.dice import DiceRoller
from realms_engine.engine.encounter import (
    add_participant,
    adjust_additional,
    new_skill_encounter,
    record_roll,
    roll_for_participant,
    set_helping,
)
from realms_engine.models.encounter import SkillParticipant


class TestSkillEncounterFlow:
    """A party climbs a cliff."""

    def test_party_climb(self) -> None:
        settings = EncounterSettings()
        state = new_skill_encounter(
            3,
            [SkillParticipant(id="ysolde", skillUsed="12"), SkillParticipant(id="brannoc")],
            required_failures=3,
            base_difficulty_score=settings.base_difficulty_score,
        )
        assert state.difficulty_score == 11
        assert state.required_successes == 3

        state = add_participant(state, SkillParticipant(id="pip"))
        state = set_helping(state, "pip", True)
        state = record_roll(state, "ysolde", 17)
        state = record_roll(state, "brannoc", 10)
        state = record_roll(state, "pip", 20)

        assert state.current_successes == 2
        assert state.current_failures == 1

        state = adjust_additional(state, successes=1)
        assert state.net_successes == 2
        assert state.current_successes + state.additional_successes >= state.required_successes

    def test_engine_rolls(self) -> None:
        settings = EncounterSettings()
        roller = DiceRoller(seed=3, check_expression=settings.roll_expression)
        state = new_skill_encounter(1, [SkillParticipant(id=f"p{i}") for i in range(4)])

        for participant in state.participants:
            state = roll_for_participant(state, participant.id, bonus=2, roller=roller)

        assert all(p.has_rolled for p in state.participants)
        assert state.current_successes == sum(p.success_count for p in state.participants)
        assert state.current_failures == sum(p.failure_count for p in state.participants)
        assert state.current_successes + state.current_failures >= 4
