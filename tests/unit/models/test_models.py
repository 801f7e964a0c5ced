"""Tests for the Pydantic models."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from realms_engine.models.character import CharacterDraft, DefenseAllocation, EquipmentItem
from realms_engine.models.codex import CodexSnapshot, SkillMeta, build_skill_meta
from realms_engine.models.encounter import SkillEncounterState, SkillParticipant
from realms_engine.models.enums import ArchetypeCategory, Defense, FeatType, Severity
from realms_engine.models.validation import ValidationIssue


class TestCharacterDraft:
    """Tests for CharacterDraft parsing."""

    def test_editor_aliases(self, complete_draft: CharacterDraft) -> None:
        assert complete_draft.species is not None
        assert complete_draft.species.id == "1"
        assert complete_draft.species.selected_traits == ["keen-senses"]
        assert complete_draft.archetype.type == ArchetypeCategory.POWER
        assert complete_draft.archetype.power_ability == "acuity"
        assert complete_draft.training_points_spent == 20
        assert complete_draft.health_points == 10
        assert complete_draft.energy_points == 8

    def test_defense_aliases(self) -> None:
        draft = CharacterDraft.model_validate({"defenseSkills": {"mentalFortitude": 2}})
        assert draft.defense_vals.get(Defense.MENTAL_FORTITUDE) == 2

    def test_fractional_level_floored(self) -> None:
        assert CharacterDraft(level=2.5).level == 2

    @pytest.mark.parametrize("raw", [None, "", float("nan"), float("-inf")])
    def test_missing_level_defaults_to_one(self, raw: Any) -> None:
        assert CharacterDraft.model_validate({"level": raw}).level == 1

    def test_null_pool_points(self) -> None:
        draft = CharacterDraft.model_validate({"healthPoints": None, "energyPoints": 3.5})
        assert draft.health_points == 0
        assert draft.energy_points == 3

    def test_allocation_values_coerced(self) -> None:
        draft = CharacterDraft.model_validate(
            {"abilities": {"strength": None, "agility": 1.5}, "skills": {"11": 2.9}}
        )
        assert draft.abilities == {"strength": 0, "agility": 1}
        assert draft.skills == {"11": 2}

    def test_defense_nulls_coerced(self) -> None:
        draft = CharacterDraft.model_validate({"defenseVals": {"reflex": None, "might": 1.5}})
        assert draft.defense_vals.get(Defense.REFLEX) == 0
        assert draft.defense_vals.get(Defense.MIGHT) == 1

    @pytest.mark.parametrize("key", ["items", "inventory"])
    def test_equipment_wrapper_unwrapped(self, key: str) -> None:
        draft = CharacterDraft.model_validate({"equipment": {key: [{"name": "Rope", "cost": 2}]}})
        assert [item.name for item in draft.equipment] == ["Rope"]

    def test_empty_equipment_wrapper(self) -> None:
        assert CharacterDraft.model_validate({"equipment": {}}).equipment == []

    def test_unknown_keys_ignored(self) -> None:
        draft = CharacterDraft.model_validate({"name": "Ysolde", "portrait": "x.png"})
        assert draft.name == "Ysolde"

    def test_highest_ability(self) -> None:
        assert CharacterDraft(abilities={"strength": 3, "agility": 1}).highest_ability == 3
        assert CharacterDraft(abilities={"strength": -2}).highest_ability == 0
        assert CharacterDraft().highest_ability == 0

    def test_feats_of_type(self, complete_draft: CharacterDraft) -> None:
        assert [f.id for f in complete_draft.feats_of_type(FeatType.ARCHETYPE)] == ["f1"]

    def test_validate_assignment(self, complete_draft: CharacterDraft) -> None:
        with pytest.raises(ValidationError):
            complete_draft.entity_kind = "dragon"

    def test_negative_quantity_clamped(self) -> None:
        assert EquipmentItem(cost=10, quantity=-1).quantity == 0

    def test_null_item_numbers(self) -> None:
        item = EquipmentItem.model_validate({"cost": None, "quantity": None})
        assert item.cost == 0
        assert item.quantity == 1

    def test_defense_allocation_as_dict(self) -> None:
        values = DefenseAllocation(reflex=1).as_dict()
        assert values[Defense.REFLEX] == 1
        assert len(values) == 6


class TestCodex:
    """Tests for codex snapshot parsing."""

    def test_ids_coerced_to_strings(self, codex: CodexSnapshot) -> None:
        elf = codex.find_species("1")
        assert elf is not None
        assert elf.skill_ids == frozenset({"10", "0"})

    def test_find_species_by_name(self, codex: CodexSnapshot) -> None:
        assert codex.find_species(name="golem").id == "2"
        assert codex.find_species("99") is None

    def test_skill_meta(self, codex: CodexSnapshot) -> None:
        meta = codex.skill_meta()
        assert meta["12"] == SkillMeta(is_sub_skill=True, base_skill_id="11")
        assert meta["11"].is_sub_skill is False

    def test_build_skill_meta_inputs(self, codex: CodexSnapshot) -> None:
        existing = {"x": SkillMeta()}
        assert build_skill_meta(None) == {}
        assert build_skill_meta(existing) == existing
        assert build_skill_meta(existing) is not existing
        assert set(build_skill_meta(codex.skills)) == {"10", "11", "12", "13", "14"}


class TestValidationIssue:
    """Tests for ValidationIssue."""

    def test_empty_message_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ValidationIssue(emoji="x", message="", severity=Severity.ERROR)

    def test_frozen(self) -> None:
        issue = ValidationIssue(emoji="x", message="m", severity="warning")
        with pytest.raises(ValidationError):
            issue.message = "other"


class TestEncounterModels:
    """Tests for encounter state models."""

    def test_camel_case_input(self) -> None:
        data: dict[str, Any] = {
            "difficultyScore": 14,
            "requiredSuccesses": 4,
            "participants": [{"id": "p1", "hasRolled": True, "rollValue": 15, "rmBonus": 1}],
            "additionalSuccesses": 1,
        }

        state = SkillEncounterState.model_validate(data)

        assert state.difficulty_score == 14
        assert state.participants[0].rm_bonus == 1
        assert state.participants[0].counts_toward_totals is True

    def test_net_successes_serialized(self) -> None:
        dumped = SkillEncounterState(current_successes=2, current_failures=3).model_dump()
        assert dumped["net_successes"] == -1

    def test_negative_adjustments_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SkillEncounterState(additional_failures=-1)

    def test_helper_does_not_count(self) -> None:
        participant = SkillParticipant(id="p1", has_rolled=True, is_helping=True)
        assert participant.counts_toward_totals is False
