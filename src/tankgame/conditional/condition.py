"""Rule conditions - ordered aggregates of predicates.

A condition evaluates every predicate, even after one fails, so callers
can report all violated rules at once.
"""

import logging
from typing import Any, Iterator, Union

from pydantic import BaseModel, ConfigDict

from tankgame.util.function import PlayerRef, State
from tankgame.util.result import Result
from .exceptions import RuleViolationError
from .predicate import RulePredicate

logger = logging.getLogger(__name__)


class RuleCondition(BaseModel):
    """Ordered, immutable collection of rule predicates.

    Built positionally: ``RuleCondition(has_action_points, target_in_range)``.
    """

    model_config = ConfigDict(frozen=True)

    predicates: tuple[RulePredicate, ...] = ()

    def __init__(self, *predicates: RulePredicate, **data: Any):
        if predicates:
            data["predicates"] = predicates
        super().__init__(**data)

    @classmethod
    def all_of(cls, *items: Union[RulePredicate, "RuleCondition"]) -> "RuleCondition":
        """Build one condition from predicates and conditions, flattened in order."""
        predicates: list[RulePredicate] = []
        for item in items:
            if isinstance(item, RuleCondition):
                predicates.extend(item.predicates)
            else:
                predicates.append(item)
        return cls(*predicates)

    def requires_meta_data(self) -> bool:
        return any(p.requires_meta_data() for p in self.predicates)

    def test(self, state: State, player: PlayerRef, *meta: Any) -> Result[list[str]]:
        """Evaluate every predicate and collect all failure messages.

        Args:
            state: Current game state (read only)
            player: Acting player
            *meta: Action metadata, passed to predicates that need it

        Returns:
            Result.ok() if every predicate passed, otherwise an error
            carrying the failure messages in predicate order
        """
        errors: list[str] = []

        for predicate in self.predicates:
            if predicate.requires_meta_data():
                outcome = predicate.test(state, player, *meta)
            else:
                outcome = predicate.test_without_meta(state, player)
            if outcome.is_error():
                errors.append(outcome.get_error())

        if not errors:
            return Result[list[str]].ok()

        logger.debug(
            "Condition failed with %d of %d predicate(s) violated",
            len(errors),
            len(self.predicates),
        )
        return Result[list[str]].error(errors)

    def enforce(self, state: State, player: PlayerRef, *meta: Any) -> None:
        """Evaluate like ``test`` but raise when any rule fails.

        Raises:
            RuleViolationError: Carrying every failure message
        """
        result = self.test(state, player, *meta)
        if result.is_error():
            raise RuleViolationError(result.get_error())

    def __add__(self, other: Union[RulePredicate, "RuleCondition"]) -> "RuleCondition":
        if not isinstance(other, (RulePredicate, RuleCondition)):
            return NotImplemented
        return RuleCondition.all_of(self, other)

    def __len__(self) -> int:
        return len(self.predicates)

    def __iter__(self) -> Iterator[RulePredicate]:  # type: ignore[override]
        return iter(self.predicates)

    def __repr__(self) -> str:
        names = ", ".join(p.name for p in self.predicates)
        return f"RuleCondition({names})"


__all__ = ["RuleCondition"]
