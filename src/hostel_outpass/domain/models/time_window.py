"""Time window domain models produced by the time-window policy."""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum


class DepartureWindow(str, Enum):
    """Where `now` falls relative to the departure window of a pass."""

    TOO_EARLY = "TOO_EARLY"
    VALID_COUNTDOWN = "VALID_COUNTDOWN"
    VALID_GRACE = "VALID_GRACE"
    EXPIRED = "EXPIRED"


@dataclass(frozen=True)
class WindowState:
    """Departure window position plus the time left in the current phase.

    For TOO_EARLY, `remaining` is the time until the window opens. For
    VALID_COUNTDOWN it is the time until the scheduled leave start, and for
    VALID_GRACE the time until the window closes. EXPIRED carries None.
    """

    window: DepartureWindow
    remaining: timedelta | None = None

    @property
    def is_open(self) -> bool:
        """Whether a departure may be marked now."""
        return self.window in (DepartureWindow.VALID_COUNTDOWN, DepartureWindow.VALID_GRACE)


@dataclass(frozen=True)
class LatenessInfo:
    """Return lateness against the expected return date."""

    is_overdue: bool
    hours_late: int


@dataclass(frozen=True)
class ExpiryInfo:
    """Whether a return falls outside the 24h window after departure."""

    is_expired: bool
    hours_expired: int
