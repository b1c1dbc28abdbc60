"""Tests for BoardFormatter."""

import io
from datetime import UTC, datetime, timedelta

import pytest

from hostel_outpass.adapters.config import AppConfig
from hostel_outpass.adapters.formatters import BoardFormatter
from hostel_outpass.adapters.publishers import ConsoleStatePublisher
from hostel_outpass.adapters.state import GateState
from hostel_outpass.domain.models import (
    DepartureBoardEntry,
    OutpassStatus,
    ReturnBoardEntry,
    TodayActivity,
)
from hostel_outpass.domain.policy import classify_for_departure, classify_for_return
from tests.test_gate_service import FixedClock
from tests.test_outpass_classifier import LEAVE_START, make_active_outpass, make_outpass


@pytest.fixture
def formatter() -> BoardFormatter:
    """Create a formatter displaying times in UTC."""
    return BoardFormatter(AppConfig.for_testing(timezone="UTC"))


def test_format_timestamp_uses_configured_timezone() -> None:
    """Given an IST display timezone, when formatting a UTC time, then it is shifted."""
    formatter = BoardFormatter(AppConfig.for_testing(timezone="Asia/Kolkata"))

    assert formatter.format_timestamp(LEAVE_START) == "10 Jan 2024, 03:30 PM"
    assert formatter.format_timestamp(None) == "N/A"


def test_departure_entry_shows_urgent_marker(formatter: BoardFormatter) -> None:
    """Given less than 2h left, when formatting, then the entry is marked urgent."""
    outpass = make_outpass()
    now = LEAVE_START + timedelta(hours=23)
    entry = DepartureBoardEntry(outpass=outpass, classification=classify_for_departure(now, outpass))

    text = formatter.format_departure_entry(entry)

    assert "[42] Asha Verma (21CS1042) -> Pune" in text
    assert "+ Mark departure within 1h 0m (URGENT)" in text


def test_departure_entry_shows_error(formatter: BoardFormatter) -> None:
    """Given an invalid pass, when formatting, then the error kind is shown."""
    outpass = make_outpass(status=OutpassStatus.PENDING)
    entry = DepartureBoardEntry(
        outpass=outpass, classification=classify_for_departure(LEAVE_START, outpass)
    )

    assert "! INVALID_STATE" in formatter.format_departure_entry(entry)


def test_return_entry_shows_time_since_departure(formatter: BoardFormatter) -> None:
    """Given an overdue pass, when formatting, then elapsed time and status message are shown."""
    outpass = make_active_outpass(departed=datetime(2024, 1, 10, 20, 0, tzinfo=UTC))
    now = datetime(2024, 1, 11, 15, 0, tzinfo=UTC)
    entry = ReturnBoardEntry(outpass=outpass, classification=classify_for_return(now, outpass))

    text = formatter.format_return_entry(entry, now)

    assert "(19h 0m ago)" in text
    assert "Mark Late Return - OVERDUE - Returned 5 hours after expected return" in text


def test_return_entry_to_dict(formatter: BoardFormatter) -> None:
    """Given an expired return, when converting to dict, then camelCase fields are set."""
    outpass = make_active_outpass()
    now = datetime(2024, 1, 11, 15, 0, tzinfo=UTC)
    entry = ReturnBoardEntry(outpass=outpass, classification=classify_for_return(now, outpass))

    data = formatter.return_entry_to_dict(entry)

    assert data["id"] == "42"
    assert data["studentRollNumber"] == "21CS1042"
    assert data["classification"]["category"] == "EXPIRED_RETURN"
    assert data["classification"]["hoursExpired"] == 5
    assert data["classification"]["reasonRequired"] is True


def test_departure_entry_to_dict_has_remaining_seconds(formatter: BoardFormatter) -> None:
    """Given a countdown pass, when converting to dict, then remaining seconds are included."""
    outpass = make_outpass()
    now = LEAVE_START - timedelta(hours=2)
    entry = DepartureBoardEntry(outpass=outpass, classification=classify_for_departure(now, outpass))

    data = formatter.departure_entry_to_dict(entry)

    assert data["classification"]["status"] == "COUNTDOWN_TO_DEPARTURE"
    assert data["classification"]["remainingSeconds"] == 7200
    assert data["leaveStartDate"] == "2024-01-10T10:00:00+00:00"


def test_format_today_activity_counts_late_returns(formatter: BoardFormatter) -> None:
    """Given today's returns with one late, when formatting, then the late count is shown."""
    returned = datetime(2024, 1, 11, 15, 0, tzinfo=UTC)
    activity = TodayActivity(
        returns_today=[
            make_active_outpass(id="1", actual_return_time=returned, is_late_return=True),
            make_active_outpass(id="2", actual_return_time=returned, is_late_return=False),
        ],
    )

    text = formatter.format_today_activity(activity)

    assert "Departures today (0):" in text
    assert "Returns today (2, 1 late):" in text
    assert "[LATE]" in text
    assert "Expected returns (0):" in text


def test_format_gate_state_flags_stale_snapshot(formatter: BoardFormatter) -> None:
    """Given a failed refresh over an old snapshot, when formatting, then the header says so."""
    now = LEAVE_START + timedelta(hours=23)
    approved = make_outpass()
    active = make_active_outpass(id="7")
    state = GateState(
        departure_board=[
            DepartureBoardEntry(outpass=approved, classification=classify_for_departure(now, approved))
        ],
        return_board=[ReturnBoardEntry(outpass=active, classification=classify_for_return(now, active))],
        last_update=LEAVE_START,
        api_status="error",
    )

    text = formatter.format_gate_state(state, now)

    assert text.startswith(
        "Gate desk - updated 10 Jan 2024, 10:00 AM [API ERROR: showing last good snapshot]"
    )
    assert "Departures: 1 markable, 0 too early, 0 expired, 0 invalid" in text
    assert "Students out: 1 (1 on time, 0 overdue, 0 expired)" in text
    assert "[42] Asha Verma (21CS1042)" in text
    assert "Departures today" not in text


def test_format_gate_state_includes_today_activity(formatter: BoardFormatter) -> None:
    """Given a state with today's activity, when formatting, then the activity sections follow."""
    state = GateState(today_activity=TodayActivity(), api_status="success")

    text = formatter.format_gate_state(state, LEAVE_START)

    assert "API ERROR" not in text
    assert "Departures: 0 markable" in text
    assert text.endswith("Expected returns (0):")


def test_console_publisher_writes_current_state(formatter: BoardFormatter) -> None:
    """Given a poller-filled state, when publishing twice, then each snapshot reaches the stream."""
    state = GateState(api_status="success", last_update=LEAVE_START)
    stream = io.StringIO()
    publisher = ConsoleStatePublisher(state, formatter, FixedClock(LEAVE_START), stream)

    publisher.publish()
    state.api_status = "error"
    publisher.publish()

    output = stream.getvalue()
    assert output.count("Gate desk - updated 10 Jan 2024, 10:00 AM") == 2
    assert output.count("[API ERROR") == 1
    assert output.endswith("\n\n")
