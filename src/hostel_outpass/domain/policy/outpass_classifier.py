"""Outpass classifier combining the time-window policy with pass status."""

from datetime import datetime, timedelta

from hostel_outpass.domain.models.classification import (
    ClassificationError,
    ClassificationErrorKind,
    DepartureClassification,
    DepartureStatus,
    ReturnCategory,
    ReturnClassification,
)
from hostel_outpass.domain.models.outpass import Outpass, OutpassStatus
from hostel_outpass.domain.models.time_window import DepartureWindow
from hostel_outpass.domain.policy.time_window_policy import (
    departure_expiry_for_return,
    departure_window,
    format_remaining,
    return_lateness,
)

URGENT_THRESHOLD = timedelta(hours=2)

_WINDOW_TO_STATUS = {
    DepartureWindow.TOO_EARLY: DepartureStatus.TOO_EARLY,
    DepartureWindow.VALID_COUNTDOWN: DepartureStatus.COUNTDOWN_TO_DEPARTURE,
    DepartureWindow.VALID_GRACE: DepartureStatus.TIME_REMAINING,
    DepartureWindow.EXPIRED: DepartureStatus.EXPIRED,
}


def _is_naive(value: datetime | None) -> bool:
    return value is not None and (value.tzinfo is None or value.utcoffset() is None)


def _check_timestamps(now: datetime, outpass: Outpass) -> ClassificationError | None:
    naive = [
        name
        for name, value in (
            ("now", now),
            ("leave_start_date", outpass.leave_start_date),
            ("expected_return_date", outpass.expected_return_date),
            ("actual_departure_time", outpass.actual_departure_time),
            ("actual_return_time", outpass.actual_return_time),
        )
        if _is_naive(value)
    ]
    if naive:
        return ClassificationError(
            ClassificationErrorKind.INVALID_TIMESTAMPS,
            f"Outpass {outpass.id}: timestamps must be timezone-aware ({', '.join(naive)})",
        )
    if outpass.expected_return_date <= outpass.leave_start_date:
        return ClassificationError(
            ClassificationErrorKind.INVALID_TIMESTAMPS,
            f"Outpass {outpass.id}: expected return "
            f"{outpass.expected_return_date.isoformat()} is not after leave start "
            f"{outpass.leave_start_date.isoformat()}",
        )
    return None


def classify_for_departure(
    now: datetime, outpass: Outpass
) -> DepartureClassification | ClassificationError:
    """Classify an approved pass for the departure desk.

    Returns an error value when the pass is not a clean APPROVED record
    (no departure or return stamped) or when its dates are unusable.
    """
    if outpass.status != OutpassStatus.APPROVED:
        return ClassificationError(
            ClassificationErrorKind.INVALID_STATE,
            f"Outpass {outpass.id} is {outpass.status.value}; departure needs APPROVED",
        )
    if outpass.has_departed or outpass.has_returned:
        return ClassificationError(
            ClassificationErrorKind.INVALID_STATE,
            f"Outpass {outpass.id} is APPROVED but already has a recorded "
            f"{'return' if outpass.has_returned else 'departure'}",
        )
    error = _check_timestamps(now, outpass)
    if error is not None:
        return error

    state = departure_window(now, outpass.leave_start_date)
    status = _WINDOW_TO_STATUS[state.window]

    if state.window == DepartureWindow.TOO_EARLY:
        return DepartureClassification(
            status=status,
            window=state,
            action_enabled=False,
            label="Too Early",
            detail=f"Available in {format_remaining(state.remaining)}",
        )
    if state.window == DepartureWindow.EXPIRED:
        return DepartureClassification(
            status=status,
            window=state,
            action_enabled=False,
            label="Expired",
            detail="Departure window (24 hours after departure time) has passed",
        )
    if state.window == DepartureWindow.VALID_COUNTDOWN:
        return DepartureClassification(
            status=status,
            window=state,
            action_enabled=True,
            label=f"Departure in {format_remaining(state.remaining)}",
        )
    return DepartureClassification(
        status=status,
        window=state,
        action_enabled=True,
        label=f"Mark departure within {format_remaining(state.remaining)}",
        urgent=state.remaining < URGENT_THRESHOLD,
    )


def classify_for_return(now: datetime, outpass: Outpass) -> ReturnClassification | ClassificationError:
    """Classify an active pass for the return desk.

    An expired departure window takes precedence over an overdue return.
    """
    if outpass.status != OutpassStatus.ACTIVE:
        return ClassificationError(
            ClassificationErrorKind.INVALID_STATE,
            f"Outpass {outpass.id} is {outpass.status.value}; return needs ACTIVE",
        )
    if outpass.actual_departure_time is None:
        return ClassificationError(
            ClassificationErrorKind.INVALID_STATE,
            f"Outpass {outpass.id} is ACTIVE but has no recorded departure",
        )
    if outpass.actual_return_time is not None:
        return ClassificationError(
            ClassificationErrorKind.INVALID_STATE,
            f"Outpass {outpass.id} already has a recorded return",
        )
    error = _check_timestamps(now, outpass)
    if error is not None:
        return error

    expiry = departure_expiry_for_return(now, outpass.actual_departure_time)
    lateness = return_lateness(now, outpass.expected_return_date)

    if expiry.is_expired:
        return ReturnClassification(
            category=ReturnCategory.EXPIRED_RETURN,
            lateness=lateness,
            expiry=expiry,
            reason_required=True,
            label="Mark Expired Return",
            status_message=(
                f"EXPIRED - Returned {expiry.hours_expired} hours after 24h departure window"
            ),
            reason_prompt=(
                "Please explain why the student returned after the 24h departure window expired"
            ),
        )
    if lateness.is_overdue:
        return ReturnClassification(
            category=ReturnCategory.OVERDUE_RETURN,
            lateness=lateness,
            expiry=expiry,
            reason_required=True,
            label="Mark Late Return",
            status_message=f"OVERDUE - Returned {lateness.hours_late} hours after expected return",
            reason_prompt="Please provide the reason why the student returned late",
        )
    return ReturnClassification(
        category=ReturnCategory.ON_TIME_RETURN,
        lateness=lateness,
        expiry=expiry,
        reason_required=False,
        label="Mark Return",
    )
