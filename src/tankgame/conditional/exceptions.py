"""Rule evaluation exceptions.

Expected rule failures are returned as ``Result.error`` and never raised
from ``test``. The exceptions here cover two cases:

- Contract errors: a caller or rule author misused the API.
- RuleViolationError: fail-fast form of a failed condition, raised only
  by ``RuleCondition.enforce``.
"""

from typing import Any, List


class RuleError(Exception):
    """Base class for rule engine errors."""


class RuleContractError(RuleError):
    """Raised when the predicate/condition API is used incorrectly."""


class MetadataRequiredError(RuleContractError, TypeError):
    """Metadata-free entry point invoked on a metadata-aware predicate."""

    def __init__(self, predicate_name: str):
        self.predicate_name = predicate_name
        super().__init__(
            f"Predicate '{predicate_name}' requires metadata; "
            f"call test(state, player, *meta) instead"
        )


class InvalidOutcomeError(RuleContractError, TypeError):
    """A rule function returned something other than a Result[str].

    Covers both non-Result return values and failures whose payload is
    not a single message string.
    """

    def __init__(self, predicate_name: str, value: Any):
        self.predicate_name = predicate_name
        self.value = value
        super().__init__(
            f"Predicate '{predicate_name}' returned {value!r}, "
            f"expected Result with a str error message"
        )


class RuleViolationError(RuleError):
    """Raised when a condition is enforced and one or more rules fail.

    Carries every failure message, in evaluation order.
    """

    def __init__(self, messages: List[str]):
        self.messages = list(messages)
        super().__init__(f"Rule check failed with {len(self.messages)} violation(s)")

    def __str__(self) -> str:
        if not self.messages:
            return "RuleViolationError(no violations)"
        lines = [f"RuleViolationError({len(self.messages)} violations):"]
        for message in self.messages:
            lines.append(f"  - {message}")
        return "\n".join(lines)


__all__ = [
    "RuleError",
    "RuleContractError",
    "MetadataRequiredError",
    "InvalidOutcomeError",
    "RuleViolationError",
]
