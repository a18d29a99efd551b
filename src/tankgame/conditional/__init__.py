"""Conditional rules package.

Files:
- predicate.py: RulePredicate and its metadata-aware/metadata-free variants
- condition.py: RuleCondition, aggregating every failing predicate
- exceptions.py: contract and violation errors
- formatter.py: violation reports for players and operators
"""

from .exceptions import (
    RuleError,
    RuleContractError,
    MetadataRequiredError,
    InvalidOutcomeError,
    RuleViolationError,
)
from .predicate import RulePredicate, MetaRulePredicate, PlainRulePredicate
from .condition import RuleCondition
from .formatter import ReportConfig, ViolationReport, ViolationFormatter

__all__ = [
    # Exceptions
    "RuleError",
    "RuleContractError",
    "MetadataRequiredError",
    "InvalidOutcomeError",
    "RuleViolationError",
    # Rules
    "RulePredicate",
    "MetaRulePredicate",
    "PlainRulePredicate",
    "RuleCondition",
    # Reporting
    "ReportConfig",
    "ViolationReport",
    "ViolationFormatter",
]
