"""Protocol for reading the current time."""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Source of `now` for the outer boundary of the application."""

    def now(self) -> datetime:
        """Return the current timezone-aware time."""
        ...
