"""Rule predicates - the atomic unit of action validation.

A predicate is either metadata-aware (``MetaRulePredicate``) or
metadata-free (``PlainRulePredicate``). Rule authors usually build them
through the ``RulePredicate`` classmethods:

    has_action_points = RulePredicate.check(
        lambda state, player: player.action_points > 0,
        "not enough action points",
    )
    target_in_range = RulePredicate.check_meta(
        lambda state, player, target: distance(player, target) <= 2,
        "target is out of range",
    )

Predicates are frozen models holding only the wrapped function, so they
are meant to be shared as module-level constants.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from tankgame.util.function import (
    MetaRuleFunction,
    MetaRuleTest,
    PlayerRef,
    RuleFunction,
    RuleTest,
    State,
)
from tankgame.util.result import Result
from .exceptions import InvalidOutcomeError, MetadataRequiredError

if TYPE_CHECKING:
    from .condition import RuleCondition

logger = logging.getLogger(__name__)


class RulePredicate(BaseModel, ABC):
    """One indivisible validation rule.

    ``name`` defaults to the wrapped function's ``__name__`` and is used in
    logs and contract errors.
    """

    model_config = ConfigDict(frozen=True)

    function: Callable[..., Result[str]]
    name: str = ""

    @model_validator(mode="before")
    @classmethod
    def default_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("name"):
            function = data.get("function")
            data = {**data, "name": getattr(function, "__name__", type(function).__name__)}
        return data

    # --- construction forms ---

    @classmethod
    def of_meta(cls, function: MetaRuleFunction, name: Optional[str] = None) -> "MetaRulePredicate":
        """Predicate from ``(state, player, *meta) -> Result[str]``."""
        return MetaRulePredicate(function=function, name=name or "")

    @classmethod
    def of(cls, function: RuleFunction, name: Optional[str] = None) -> "PlainRulePredicate":
        """Predicate from ``(state, player) -> Result[str]``."""
        return PlainRulePredicate(function=function, name=name or "")

    @classmethod
    def check_meta(
        cls,
        test: MetaRuleTest,
        message: str,
        name: Optional[str] = None,
    ) -> "MetaRulePredicate":
        """Predicate from a boolean test over ``(state, player, *meta)``.

        ``True`` maps to success, ``False`` to a failure with ``message``.
        The predicate is named after ``message`` unless ``name`` is given.
        """
        if not callable(test):
            raise TypeError(f"Rule test must be callable, got {type(test).__name__}")

        def function(state: State, player: PlayerRef, *meta: Any) -> Result[str]:
            return Result.ok() if test(state, player, *meta) else Result.error(message)

        return MetaRulePredicate(function=function, name=name or message)

    @classmethod
    def check(cls, test: RuleTest, message: str, name: Optional[str] = None) -> "PlainRulePredicate":
        """Predicate from a boolean test over ``(state, player)``."""
        if not callable(test):
            raise TypeError(f"Rule test must be callable, got {type(test).__name__}")

        def function(state: State, player: PlayerRef) -> Result[str]:
            return Result.ok() if test(state, player) else Result.error(message)

        return PlainRulePredicate(function=function, name=name or message)

    # --- evaluation ---

    @abstractmethod
    def requires_meta_data(self) -> bool:
        ...

    @abstractmethod
    def test(self, state: State, player: PlayerRef, *meta: Any) -> Result[str]:
        """Evaluate the rule, passing metadata through if the rule uses it."""
        ...

    @abstractmethod
    def test_without_meta(self, state: State, player: PlayerRef) -> Result[str]:
        """Evaluate a metadata-free rule.

        Raises:
            MetadataRequiredError: If this predicate needs metadata
        """
        ...

    def to_condition(self) -> "RuleCondition":
        """Wrap this predicate as a one-element condition."""
        from .condition import RuleCondition

        return RuleCondition(self)

    def _outcome(self, value: Any) -> Result[str]:
        if not isinstance(value, Result) or (
            value.is_error() and not isinstance(value.get_error(), str)
        ):
            logger.error("Predicate %s returned %r instead of a Result[str]", self.name, value)
            raise InvalidOutcomeError(self.name, value)
        if value.is_error():
            logger.debug("Predicate %s failed: %s", self.name, value.get_error())
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class MetaRulePredicate(RulePredicate):
    """Predicate whose rule reads action metadata (target, amount, ...)."""

    def requires_meta_data(self) -> bool:
        return True

    def test(self, state: State, player: PlayerRef, *meta: Any) -> Result[str]:
        return self._outcome(self.function(state, player, *meta))

    def test_without_meta(self, state: State, player: PlayerRef) -> Result[str]:
        logger.error("Predicate %s requires metadata but was called without it", self.name)
        raise MetadataRequiredError(self.name)


class PlainRulePredicate(RulePredicate):
    """Predicate whose rule only reads state and player."""

    def requires_meta_data(self) -> bool:
        return False

    def test(self, state: State, player: PlayerRef, *meta: Any) -> Result[str]:
        # Metadata is not used by this rule
        return self.test_without_meta(state, player)

    def test_without_meta(self, state: State, player: PlayerRef) -> Result[str]:
        return self._outcome(self.function(state, player))


__all__ = ["RulePredicate", "MetaRulePredicate", "PlainRulePredicate"]
