"""Classification domain models consumed by boards and action gating."""

from dataclasses import dataclass
from enum import Enum

from hostel_outpass.domain.models.time_window import (
    ExpiryInfo,
    LatenessInfo,
    WindowState,
)


class DepartureStatus(str, Enum):
    """Display status of an approved pass at the departure desk."""

    TOO_EARLY = "TOO_EARLY"
    COUNTDOWN_TO_DEPARTURE = "COUNTDOWN_TO_DEPARTURE"
    TIME_REMAINING = "TIME_REMAINING"
    EXPIRED = "EXPIRED"


class ReturnCategory(str, Enum):
    """Return category of an active pass, in increasing severity."""

    ON_TIME_RETURN = "ON_TIME_RETURN"
    OVERDUE_RETURN = "OVERDUE_RETURN"
    EXPIRED_RETURN = "EXPIRED_RETURN"


class ClassificationErrorKind(str, Enum):
    """Recoverable precondition and data-quality failures."""

    INVALID_STATE = "INVALID_STATE"
    INVALID_TIMESTAMPS = "INVALID_TIMESTAMPS"
    MISSING_REASON = "MISSING_REASON"


@dataclass(frozen=True)
class ClassificationError:
    """Error value returned instead of a classification or payload."""

    kind: ClassificationErrorKind
    message: str


@dataclass(frozen=True)
class DepartureClassification:
    """Departure affordance for an approved pass."""

    status: DepartureStatus
    window: WindowState
    action_enabled: bool
    label: str
    detail: str | None = None
    urgent: bool = False  # Visual emphasis only, still TIME_REMAINING


@dataclass(frozen=True)
class ReturnClassification:
    """Return affordance for an active pass."""

    category: ReturnCategory
    lateness: LatenessInfo
    expiry: ExpiryInfo
    reason_required: bool
    label: str
    status_message: str | None = None
    reason_prompt: str | None = None
    action_enabled: bool = True  # Returns have no upper time bound
