"""Dice rolling for skill checks.

Uses the d20 library. The encounter tracker rolls here when the roll
master asks the engine to roll for a participant; players rolling
physical dice enter the value directly instead.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

import d20

from realms_engine.core.exceptions import DiceRollError
from realms_engine.core.logging import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class DiceResult:
    """Outcome of a dice roll.

    Attributes:
        expression: The expression that was rolled.
        total: The total result, modifiers included.
        modifier: Flat modifier added to the dice.
        natural: The dice total before the modifier.
        detail: d20's human-readable breakdown, e.g. ``1d20 (14) + 3 = `17```.
    """

    expression: str
    total: int
    modifier: int
    natural: int
    detail: str

    @property
    def is_critical(self) -> bool:
        return self.expression.startswith("1d20") and self.natural == 20

    @property
    def is_fumble(self) -> bool:
        return self.expression.startswith("1d20") and self.natural == 1


class DiceRoller:
    """Roll dice expressions with the d20 library.

    Example:
        >>> roller = DiceRoller(seed=7)
        >>> result = roller.roll_skill_check(3)
        >>> 4 <= result.total <= 23
        True
    """

    def __init__(self, *, seed: int | None = None, check_expression: str = "1d20") -> None:
        """Initialize the dice roller.

        Args:
            seed: Optional random seed for reproducible rolls.
            check_expression: Dice rolled for a skill check.
        """
        self._seed = seed
        self._check_expression = check_expression
        if seed is not None:
            random.seed(seed)
        logger.debug("DiceRoller initialized", seed=seed, check_expression=check_expression)

    def roll(self, expression: str, *, modifier: int = 0) -> DiceResult:
        """Roll a dice expression.

        Args:
            expression: Dice expression, e.g. ``1d20+5``.
            modifier: Flat modifier already included in ``expression``,
                used to report the natural roll.

        Returns:
            DiceResult with the total and breakdown.

        Raises:
            DiceRollError: If the expression is empty or invalid.
        """
        if not expression or not expression.strip():
            raise DiceRollError("Empty dice expression", expression=expression)

        try:
            result = d20.roll(expression)
        except d20.RollError as exc:
            raise DiceRollError(
                f"Invalid dice expression: {exc}",
                expression=expression,
            ) from exc

        outcome = DiceResult(
            expression=expression,
            total=result.total,
            modifier=modifier,
            natural=result.total - modifier,
            detail=str(result),
        )
        logger.info("Dice rolled", expression=expression, total=outcome.total)
        return outcome

    def roll_skill_check(self, bonus: int = 0) -> DiceResult:
        """Roll a skill check with a flat bonus."""
        sign = "+" if bonus >= 0 else ""
        expression = f"{self._check_expression}{sign}{bonus}"
        return self.roll(expression, modifier=bonus)


__all__ = [
    "DiceResult",
    "DiceRoller",
]
