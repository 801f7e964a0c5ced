"""Validation engine for the character creator.

``issues_for_step`` reports what is missing or wrong on one wizard step;
``all_issues`` collects every step plus the two finalize-only checks (name
and health-energy allocation) for the "Review & Create" screen.

Each step is an independent checker registered in ``STEP_CHECKS``. Adding a
step means adding a checker; existing checkers are untouched. Nothing is
cached: issues are recomputed from the draft on every call, so calling
twice on an unchanged draft gives the same list.

Example:
    >>> context = ValidationContext.from_codex(codex)
    >>> for issue in all_issues(draft, context):
    ...     print(issue.emoji, issue.message)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from realms_engine.core.constants import (
    ARCHETYPE_FEAT_QUOTA,
    DEFENSE_PURCHASE_MAX,
    FREE_SKILL_POINT_SENTINEL,
    STARTING_CURRENCY,
)
from realms_engine.core.logging import get_logger
from realms_engine.engine.budget import (
    AbilityPointFormula,
    normalize_level,
    total_ability_points,
    total_health_energy_pool,
    total_training_points,
)
from realms_engine.engine.derived import ability_defense_bonus
from realms_engine.engine.spending import allocation_value, skill_point_summary
from realms_engine.models.character import CharacterDraft
from realms_engine.models.codex import (
    CodexSnapshot,
    SkillMeta,
    SpeciesEntry,
    build_skill_meta,
    find_species,
)
from realms_engine.models.enums import CreatorStep, Defense, FeatType, Severity
from realms_engine.models.validation import ValidationIssue


if TYPE_CHECKING:
    from realms_engine.core.config import Settings


logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidationContext:
    """Codex data and rule parameters the validation engine reads.

    Attributes:
        species: Codex species entries.
        skill_meta: Skill id to metadata.
        ability_points: Ability point progression.
        starting_currency: Starting purse for equipment.
    """

    species: Sequence[SpeciesEntry] = ()
    skill_meta: Mapping[str, SkillMeta] = field(default_factory=dict)
    ability_points: AbilityPointFormula = total_ability_points
    starting_currency: int = STARTING_CURRENCY

    @classmethod
    def from_codex(
        cls,
        codex: CodexSnapshot,
        settings: Settings | None = None,
        *,
        ability_points: AbilityPointFormula = total_ability_points,
    ) -> ValidationContext:
        """Build a context from a codex snapshot and optional settings.

        Args:
            codex: Already-fetched codex content.
            settings: Engine settings; defaults apply when omitted.
            ability_points: Ability point progression to validate against.

        Returns:
            A ValidationContext.
        """
        starting_currency = (
            settings.creator.starting_currency if settings is not None else STARTING_CURRENCY
        )
        return cls(
            species=tuple(codex.species),
            skill_meta=build_skill_meta(codex.skills),
            ability_points=ability_points,
            starting_currency=starting_currency,
        )

    def find_species(self, draft: CharacterDraft) -> SpeciesEntry | None:
        if draft.species is None:
            return None
        return find_species(tuple(self.species), draft.species.id, draft.species.name)


StepCheck = Callable[[CharacterDraft, ValidationContext], list[ValidationIssue]]


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def _points_issue(
    remaining: int,
    *,
    emoji: str,
    unspent: str,
    overspent: str,
    step: CreatorStep,
) -> list[ValidationIssue]:
    """Warn on unspent points, error on overspent ones, nothing when exact."""
    if remaining > 0:
        return [
            ValidationIssue(
                emoji=emoji,
                message=unspent.format(remaining=remaining),
                severity=Severity.WARNING,
                step=step,
            )
        ]
    if remaining < 0:
        return [
            ValidationIssue(
                emoji=emoji,
                message=overspent.format(over=abs(remaining)),
                severity=Severity.ERROR,
                step=step,
            )
        ]
    return []


# =============================================================================
# Step Checks
# =============================================================================


def check_archetype(draft: CharacterDraft, context: ValidationContext) -> list[ValidationIssue]:
    if draft.archetype is None or draft.archetype.type is None:
        return [
            ValidationIssue(
                emoji="🎭",
                message="You haven't selected an archetype yet.",
                severity=Severity.ERROR,
                step=CreatorStep.ARCHETYPE,
            )
        ]
    return []


def check_species(draft: CharacterDraft, context: ValidationContext) -> list[ValidationIssue]:
    if draft.species is None or not draft.species.id:
        return [
            ValidationIssue(
                emoji="🌟",
                message="You need to choose your species.",
                severity=Severity.ERROR,
                step=CreatorStep.SPECIES,
            )
        ]
    return []


def check_ancestry(draft: CharacterDraft, context: ValidationContext) -> list[ValidationIssue]:
    """Require a species, then at least one trait when the species has any.

    A species missing from the codex snapshot is assumed to define traits.
    """
    if draft.species is None or not draft.species.id:
        return [
            ValidationIssue(
                emoji="🌟",
                message="Species is required before choosing ancestry traits.",
                severity=Severity.ERROR,
                step=CreatorStep.ANCESTRY,
            )
        ]
    species = context.find_species(draft)
    if species is None or species.ancestry_traits is None:
        trait_count = 1
    else:
        trait_count = len(species.ancestry_traits)
    if trait_count > 0 and not draft.species.selected_traits:
        return [
            ValidationIssue(
                emoji="🧬",
                message="You need to select at least one ancestry trait.",
                severity=Severity.ERROR,
                step=CreatorStep.ANCESTRY,
            )
        ]
    return []


def check_abilities(draft: CharacterDraft, context: ValidationContext) -> list[ValidationIssue]:
    level = normalize_level(draft.level)
    used = sum(value or 0 for value in draft.abilities.values())
    remaining = context.ability_points(level) - used
    return _points_issue(
        remaining,
        emoji="⚡",
        unspent=(
            "You still have {remaining} ability point to spend."
            if remaining == 1
            else "You still have {remaining} ability points to spend."
        ),
        overspent="You've overspent ability points by {over}.",
        step=CreatorStep.ABILITIES,
    )


def _species_skill_ids(draft: CharacterDraft, context: ValidationContext) -> frozenset[str]:
    species = context.find_species(draft)
    return species.skill_ids if species is not None else frozenset()


def _defense_issues(draft: CharacterDraft, level: int) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for defense in Defense:
        purchased = draft.defense_vals.get(defense)
        if purchased <= 0:
            continue
        if purchased > DEFENSE_PURCHASE_MAX:
            issues.append(
                ValidationIssue(
                    emoji="🛡️",
                    message=(
                        f"You can buy at most {DEFENSE_PURCHASE_MAX} points of "
                        f"{defense.display_name}."
                    ),
                    severity=Severity.ERROR,
                    step=CreatorStep.SKILLS,
                )
            )
        total = ability_defense_bonus(draft.abilities, defense) + purchased
        if total > level:
            issues.append(
                ValidationIssue(
                    emoji="🛡️",
                    message=(
                        f"Your {defense.display_name} bonus of {total} is higher "
                        f"than your level ({level})."
                    ),
                    severity=Severity.ERROR,
                    step=CreatorStep.SKILLS,
                )
            )
    return issues


def _skill_chain_issues(
    draft: CharacterDraft,
    species_skill_ids: frozenset[str],
    skill_meta: Mapping[str, SkillMeta],
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for skill_id in sorted(species_skill_ids - {FREE_SKILL_POINT_SENTINEL}):
        if skill_id in draft.skills and allocation_value(draft.skills[skill_id]) < 1:
            issues.append(
                ValidationIssue(
                    emoji="📚",
                    message=f"Species skill '{skill_id}' can't drop below 1.",
                    severity=Severity.ERROR,
                    step=CreatorStep.SKILLS,
                )
            )

    for skill_id, value in draft.skills.items():
        meta = skill_meta.get(skill_id)
        if meta is None or not meta.is_sub_skill or meta.base_skill_id is None:
            continue
        if allocation_value(value) < 2:
            continue
        base_id = meta.base_skill_id
        base_proficient = (
            base_id in species_skill_ids or allocation_value(draft.skills.get(base_id)) >= 1
        )
        if not base_proficient:
            issues.append(
                ValidationIssue(
                    emoji="📚",
                    message=(
                        f"Sub-skill '{skill_id}' needs its base skill '{base_id}' "
                        "to be proficient before it can go above 1."
                    ),
                    severity=Severity.ERROR,
                    step=CreatorStep.SKILLS,
                )
            )
    return issues


def check_skills(draft: CharacterDraft, context: ValidationContext) -> list[ValidationIssue]:
    """Skill point budget, defense caps and skill proficiency chains.

    The budget is checked even before a species is chosen. Without a
    species there are no species skills and no free point, so a fresh
    draft already reports its unspent skill points.
    """
    level = normalize_level(draft.level)
    species_ids = _species_skill_ids(draft, context)
    summary = skill_point_summary(
        level,
        draft.entity_kind,
        draft.skills,
        species_ids,
        context.skill_meta,
        draft.defense_vals,
    )
    issues = _points_issue(
        summary.remaining,
        emoji="📚",
        unspent=(
            "You have {remaining} skill point left to spend."
            if summary.remaining == 1
            else "You have {remaining} skill points left to spend."
        ),
        overspent="You've overspent skill points by {over}.",
        step=CreatorStep.SKILLS,
    )
    issues.extend(_defense_issues(draft, level))
    issues.extend(_skill_chain_issues(draft, species_ids, context.skill_meta))
    return issues


def check_feats(draft: CharacterDraft, context: ValidationContext) -> list[ValidationIssue]:
    """Archetype feat quota and at least one character feat, as warnings."""
    issues: list[ValidationIssue] = []
    archetype_type = draft.archetype.type if draft.archetype is not None else None
    expected = ARCHETYPE_FEAT_QUOTA.get(archetype_type.value, 0) if archetype_type else 0
    shortfall = expected - len(draft.feats_of_type(FeatType.ARCHETYPE))
    if shortfall > 0:
        issues.append(
            ValidationIssue(
                emoji="💪",
                message=f"You need to select {_plural(shortfall, 'more archetype feat')}.",
                severity=Severity.WARNING,
                step=CreatorStep.FEATS,
            )
        )
    if not draft.feats_of_type(FeatType.CHARACTER):
        issues.append(
            ValidationIssue(
                emoji="🌠",
                message="You need to select a character feat.",
                severity=Severity.WARNING,
                step=CreatorStep.FEATS,
            )
        )
    return issues


def check_equipment(draft: CharacterDraft, context: ValidationContext) -> list[ValidationIssue]:
    """Training point and currency overspend, checked independently."""
    issues: list[ValidationIssue] = []
    level = normalize_level(draft.level)
    training_points = total_training_points(level, draft.highest_ability, draft.entity_kind)
    remaining_tp = training_points - (draft.training_points_spent or 0)
    if remaining_tp < 0:
        issues.append(
            ValidationIssue(
                emoji="🎯",
                message=f"You've overspent training points by {abs(remaining_tp)}.",
                severity=Severity.ERROR,
                step=CreatorStep.EQUIPMENT,
            )
        )
    spent_currency = sum((item.cost or 0) * item.quantity for item in draft.equipment)
    if spent_currency > context.starting_currency:
        issues.append(
            ValidationIssue(
                emoji="💰",
                message=(
                    f"You've overspent currency by "
                    f"{spent_currency - context.starting_currency}c."
                ),
                severity=Severity.ERROR,
                step=CreatorStep.EQUIPMENT,
            )
        )
    return issues


def check_nothing(draft: CharacterDraft, context: ValidationContext) -> list[ValidationIssue]:
    """Powers are optional; finalize checks only run in ``all_issues``."""
    return []


STEP_CHECKS: Mapping[CreatorStep, StepCheck] = {
    CreatorStep.ARCHETYPE: check_archetype,
    CreatorStep.SPECIES: check_species,
    CreatorStep.ANCESTRY: check_ancestry,
    CreatorStep.ABILITIES: check_abilities,
    CreatorStep.SKILLS: check_skills,
    CreatorStep.FEATS: check_feats,
    CreatorStep.EQUIPMENT: check_equipment,
    CreatorStep.POWERS: check_nothing,
    CreatorStep.FINALIZE: check_nothing,
}


# =============================================================================
# Finalize-only Checks
# =============================================================================


def check_name(draft: CharacterDraft) -> list[ValidationIssue]:
    if not draft.name.strip():
        return [
            ValidationIssue(
                emoji="📝",
                message="Your hero needs a name! Give them something legendary.",
                severity=Severity.ERROR,
            )
        ]
    return []


def check_health_energy(draft: CharacterDraft) -> list[ValidationIssue]:
    """Only the sum of health and energy is checked; any split is legal."""
    pool = total_health_energy_pool(draft.level, draft.entity_kind)
    remaining = pool - ((draft.health_points or 0) + (draft.energy_points or 0))
    if remaining > 0:
        return [
            ValidationIssue(
                emoji="❤️",
                message=(
                    f"You have {_plural(remaining, 'Health-Energy point')} to allocate."
                ),
                severity=Severity.WARNING,
            )
        ]
    if remaining < 0:
        return [
            ValidationIssue(
                emoji="❤️",
                message=f"You've over-allocated Health-Energy points by {abs(remaining)}.",
                severity=Severity.ERROR,
            )
        ]
    return []


# =============================================================================
# Public API
# =============================================================================


def issues_for_step(
    step: CreatorStep | str,
    draft: CharacterDraft,
    context: ValidationContext,
) -> list[ValidationIssue]:
    """Issues for a single wizard step.

    Args:
        step: The wizard step.
        draft: The character draft.
        context: Codex data and rule parameters.

    Returns:
        Ordered list of issues; empty when the step is complete.
    """
    return list(STEP_CHECKS[CreatorStep(step)](draft, context))


def all_issues(draft: CharacterDraft, context: ValidationContext) -> list[ValidationIssue]:
    """Every issue in the draft, for the finalize review.

    Order: the name check, every step in wizard order, then the
    health-energy allocation check.
    """
    issues = check_name(draft)
    for step in CreatorStep:
        issues.extend(issues_for_step(step, draft, context))
    issues.extend(check_health_energy(draft))
    logger.debug(
        "Draft validated",
        issue_count=len(issues),
        error_count=sum(1 for issue in issues if issue.is_error),
    )
    return issues


def is_finalizable(issues: Iterable[ValidationIssue]) -> bool:
    """True when no issue is an error; warnings never block."""
    return not any(issue.is_error for issue in issues)


__all__ = [
    "ValidationContext",
    "StepCheck",
    "STEP_CHECKS",
    "issues_for_step",
    "all_issues",
    "is_finalizable",
]
