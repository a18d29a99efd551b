"""Human-readable reports for rejected actions.

Every violation message is shown, in the order the condition produced
them, so a player sees all the reasons an action was rejected at once.
"""

from typing import Optional

from pydantic import BaseModel
from rich.table import Table

from tankgame.util.result import Result


class ReportConfig(BaseModel):
    """Presentation settings for violation reports."""

    title: str = "Action rejected"
    show_index: bool = True
    style: str = "red"


class ViolationReport(BaseModel):
    """All rule violations for one attempted action."""

    action: str
    player: str
    messages: list[str]

    @classmethod
    def from_result(
        cls,
        action: str,
        player: str,
        result: Result[list[str]],
    ) -> Optional["ViolationReport"]:
        """Build a report from a condition result, or None if it passed."""
        if result.is_ok():
            return None
        return cls(action=action, player=player, messages=list(result.get_error()))


class ViolationFormatter:
    """Format violation reports as plain text or rich tables."""

    def __init__(self, config: Optional[ReportConfig] = None):
        self.config = config or ReportConfig()

    def _label(self, index: int) -> str:
        return f"{index}." if self.config.show_index else "-"

    def format(self, report: ViolationReport) -> str:
        """Format a report as plain text.

        Example:
            Action rejected: Alice cannot move (2 violations)
              1. not enough action points
              2. target is out of range
        """
        count = len(report.messages)
        lines = [
            f"{self.config.title}: {report.player} cannot {report.action} "
            f"({count} violation{'s' if count != 1 else ''})"
        ]
        for i, message in enumerate(report.messages, start=1):
            lines.append(f"  {self._label(i)} {message}")
        return "\n".join(lines)

    def render(self, report: ViolationReport) -> Table:
        """Render a report as a rich table, one row per violation."""
        table = Table(title=f"{self.config.title}: {report.player} / {report.action}")
        if self.config.show_index:
            table.add_column("#", justify="right")
        table.add_column("Violation", style=self.config.style)

        for i, message in enumerate(report.messages, start=1):
            if self.config.show_index:
                table.add_row(str(i), message)
            else:
                table.add_row(message)
        return table


__all__ = ["ReportConfig", "ViolationReport", "ViolationFormatter"]
