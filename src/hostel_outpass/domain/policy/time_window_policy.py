"""Time-window policy for outpass departures and returns.

Pure functions of an explicit `now` over timezone-aware datetimes. The
classifiers screen out naive inputs as INVALID_TIMESTAMPS before calling in.

Hour counts are derived from millisecond deltas: remaining time is floored,
elapsed time (hours late, hours expired) is rounded half-up.
"""

from datetime import datetime, timedelta

from hostel_outpass.domain.models.time_window import (
    DepartureWindow,
    ExpiryInfo,
    LatenessInfo,
    WindowState,
)

# Departures may be marked from 24h before until 24h after the leave start
DEPARTURE_WINDOW = timedelta(hours=24)
# Returns later than 24h after the actual departure are treated as expired
RETURN_EXPIRY_WINDOW = timedelta(hours=24)

MS_PER_MINUTE = 60_000
MS_PER_HOUR = 3_600_000


def to_millis(delta: timedelta) -> int:
    """Convert a timedelta to whole milliseconds (floored)."""
    return delta // timedelta(milliseconds=1)


def floor_hours(delta: timedelta) -> int:
    """Whole hours in a delta, rounded down. Used for remaining-time displays."""
    return to_millis(delta) // MS_PER_HOUR


def round_hours(delta: timedelta) -> int:
    """Hours in a non-negative delta, rounded half-up. Used for elapsed-time displays."""
    return (to_millis(delta) + MS_PER_HOUR // 2) // MS_PER_HOUR


def departure_window(now: datetime, leave_start_date: datetime) -> WindowState:
    """Classify `now` against the departure window around `leave_start_date`."""
    opens_at = leave_start_date - DEPARTURE_WINDOW
    closes_at = leave_start_date + DEPARTURE_WINDOW

    if now < opens_at:
        return WindowState(DepartureWindow.TOO_EARLY, remaining=opens_at - now)
    if now < leave_start_date:
        return WindowState(DepartureWindow.VALID_COUNTDOWN, remaining=leave_start_date - now)
    if now <= closes_at:
        return WindowState(DepartureWindow.VALID_GRACE, remaining=closes_at - now)
    return WindowState(DepartureWindow.EXPIRED)


def return_lateness(now: datetime, expected_return_date: datetime) -> LatenessInfo:
    """How late a return at `now` is against the expected return date."""
    if now > expected_return_date:
        return LatenessInfo(is_overdue=True, hours_late=round_hours(now - expected_return_date))
    return LatenessInfo(is_overdue=False, hours_late=0)


def departure_expiry_for_return(now: datetime, actual_departure_time: datetime | None) -> ExpiryInfo:
    """Whether a return at `now` falls past the 24h window after departure."""
    if actual_departure_time is None:
        return ExpiryInfo(is_expired=False, hours_expired=0)

    expires_at = actual_departure_time + RETURN_EXPIRY_WINDOW
    if now > expires_at:
        return ExpiryInfo(is_expired=True, hours_expired=round_hours(now - expires_at))
    return ExpiryInfo(is_expired=False, hours_expired=0)


def format_remaining(delta: timedelta) -> str:
    """Format a remaining duration as '{h}h {m}m' with floored parts."""
    millis = max(to_millis(delta), 0)
    hours = millis // MS_PER_HOUR
    minutes = (millis % MS_PER_HOUR) // MS_PER_MINUTE
    return f"{hours}h {minutes}m"


def time_since(now: datetime, then: datetime) -> str:
    """Format the time elapsed since `then`, e.g. '3h 12m ago' or '40m ago'."""
    millis = max(to_millis(now - then), 0)
    hours = millis // MS_PER_HOUR
    minutes = (millis % MS_PER_HOUR) // MS_PER_MINUTE
    if hours > 0:
        return f"{hours}h {minutes}m ago"
    return f"{minutes}m ago"
