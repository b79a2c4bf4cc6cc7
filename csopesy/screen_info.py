"""Information shown on a process screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

_TIMESTAMP_FORMAT = "%m/%d/%Y, %I:%M:%S %p"


def current_timestamp(now: datetime | None = None) -> str:
    """Format ``now`` (default: the local time) as a screen creation stamp."""
    moment = now if now is not None else datetime.now()
    return moment.strftime(_TIMESTAMP_FORMAT)


@dataclass
class ScreenInfo:
    """A named process screen with its progress and creation time."""

    name: str = "Unnamed"
    current_line: int = 1
    total_line: int = 10
    timestamp: str = field(default_factory=current_timestamp)

    def render(self) -> str:
        """Return the screen's text as it is displayed."""
        return (
            f"=== SCREEN: {self.name} ===\n"
            f"Process Name       : {self.name}\n"
            f"Instruction Line   : {self.current_line} / {self.total_line}\n"
            f"Created At         : {self.timestamp}\n"
            "Type 'exit' to return to main menu.\n"
            "\n"
        )