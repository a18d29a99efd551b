"""Utility package - shared result type and callable protocols."""

from .result import Result
from .function import (
    State,
    PlayerRef,
    MetaRuleFunction,
    RuleFunction,
    MetaRuleTest,
    RuleTest,
)
from .log import configure_logging

__all__ = [
    "Result",
    "State",
    "PlayerRef",
    "MetaRuleFunction",
    "RuleFunction",
    "MetaRuleTest",
    "RuleTest",
    "configure_logging",
]
