"""Callable shapes accepted by rule predicates.

State and player references are owned by the game engine, so they are
left as ``Any`` here. Metadata is an ordered, rule-specific sequence whose
meaning is decided by each rule.
"""

from typing import Any, Protocol

from .result import Result

State = Any
PlayerRef = Any


class MetaRuleFunction(Protocol):
    """Rule body that needs action metadata."""

    def __call__(self, state: State, player: PlayerRef, *meta: Any) -> Result[str]:
        ...


class RuleFunction(Protocol):
    """Rule body that only looks at state and player."""

    def __call__(self, state: State, player: PlayerRef) -> Result[str]:
        ...


class MetaRuleTest(Protocol):
    def __call__(self, state: State, player: PlayerRef, *meta: Any) -> bool:
        ...


class RuleTest(Protocol):
    def __call__(self, state: State, player: PlayerRef) -> bool:
        ...


__all__ = [
    "State",
    "PlayerRef",
    "MetaRuleFunction",
    "RuleFunction",
    "MetaRuleTest",
    "RuleTest",
]
