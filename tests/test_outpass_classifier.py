"""Tests for the outpass classifier."""

from dataclasses import replace
from datetime import UTC, datetime, timedelta

import pytest

from hostel_outpass.domain.models import (
    ClassificationError,
    ClassificationErrorKind,
    DepartureClassification,
    DepartureStatus,
    Outpass,
    OutpassStatus,
    ReturnCategory,
    ReturnClassification,
)
from hostel_outpass.domain.policy import classify_for_departure, classify_for_return
from hostel_outpass.domain.policy.time_window_policy import departure_expiry_for_return

LEAVE_START = datetime(2024, 1, 10, 10, 0, tzinfo=UTC)
EXPECTED_RETURN = datetime(2024, 1, 11, 10, 0, tzinfo=UTC)


def make_outpass(**overrides: object) -> Outpass:
    """Build an approved outpass leaving Jan 10 10:00 and due back Jan 11 10:00."""
    values: dict[str, object] = {
        "id": "42",
        "status": OutpassStatus.APPROVED,
        "leave_start_date": LEAVE_START,
        "expected_return_date": EXPECTED_RETURN,
        "student_name": "Asha Verma",
        "student_roll_number": "21CS1042",
        "destination": "Pune",
        "reason": "Family visit",
    }
    values.update(overrides)
    return Outpass(**values)  # type: ignore[arg-type]


def make_active_outpass(departed: datetime = LEAVE_START, **overrides: object) -> Outpass:
    """Build an active outpass that departed at `departed`."""
    values: dict[str, object] = {"status": OutpassStatus.ACTIVE, "actual_departure_time": departed}
    values.update(overrides)
    return make_outpass(**values)


class TestClassifyForDeparture:
    """Tests for classify_for_departure."""

    def test_when_too_early_then_disabled_with_opening_time(self) -> None:
        """Given now 25h before leave start, when classifying, then disabled, available in 1h."""
        result = classify_for_departure(datetime(2024, 1, 9, 9, 0, tzinfo=UTC), make_outpass())

        assert isinstance(result, DepartureClassification)
        assert result.status == DepartureStatus.TOO_EARLY
        assert result.action_enabled is False
        assert result.label == "Too Early"
        assert result.detail == "Available in 1h 0m"

    def test_when_before_leave_start_then_countdown_enabled(self) -> None:
        """Given now 3h before leave start, when classifying, then countdown and enabled."""
        result = classify_for_departure(LEAVE_START - timedelta(hours=3), make_outpass())

        assert isinstance(result, DepartureClassification)
        assert result.status == DepartureStatus.COUNTDOWN_TO_DEPARTURE
        assert result.action_enabled is True
        assert result.label == "Departure in 3h 0m"

    def test_when_after_leave_start_then_time_remaining(self) -> None:
        """Given now 1h after leave start, when classifying, then 23h remaining, not urgent."""
        result = classify_for_departure(LEAVE_START + timedelta(hours=1), make_outpass())

        assert isinstance(result, DepartureClassification)
        assert result.status == DepartureStatus.TIME_REMAINING
        assert result.window.remaining == timedelta(hours=23)
        assert result.label == "Mark departure within 23h 0m"
        assert result.urgent is False

    def test_when_under_two_hours_left_then_urgent(self) -> None:
        """Given 1h59m left in the window, when classifying, then urgent."""
        now = LEAVE_START + timedelta(hours=22, minutes=1)

        result = classify_for_departure(now, make_outpass())

        assert isinstance(result, DepartureClassification)
        assert result.status == DepartureStatus.TIME_REMAINING
        assert result.urgent is True
        assert result.action_enabled is True

    def test_when_past_window_then_expired_disabled(self) -> None:
        """Given now 25h after leave start, when classifying, then expired and disabled."""
        result = classify_for_departure(LEAVE_START + timedelta(hours=25), make_outpass())

        assert isinstance(result, DepartureClassification)
        assert result.status == DepartureStatus.EXPIRED
        assert result.action_enabled is False

    @pytest.mark.parametrize(
        "status",
        [OutpassStatus.PENDING, OutpassStatus.ACTIVE, OutpassStatus.COMPLETED, OutpassStatus.CANCELLED],
    )
    def test_when_not_approved_then_invalid_state(self, status: OutpassStatus) -> None:
        """Given a non-approved pass, when classifying, then INVALID_STATE."""
        result = classify_for_departure(LEAVE_START, make_outpass(status=status))

        assert isinstance(result, ClassificationError)
        assert result.kind == ClassificationErrorKind.INVALID_STATE

    @pytest.mark.parametrize(
        "stamps",
        [
            {"actual_departure_time": datetime(2024, 1, 10, 9, 0, tzinfo=UTC)},
            {
                "actual_departure_time": datetime(2024, 1, 10, 9, 0, tzinfo=UTC),
                "actual_return_time": datetime(2024, 1, 10, 9, 30, tzinfo=UTC),
            },
            {"actual_return_time": datetime(2024, 1, 10, 9, 30, tzinfo=UTC)},
        ],
    )
    def test_when_approved_pass_already_stamped_then_invalid_state(
        self, stamps: dict[str, datetime]
    ) -> None:
        """Given an approved pass with gate timestamps, when classifying, then INVALID_STATE."""
        outpass = make_outpass(**stamps)

        result = classify_for_departure(LEAVE_START + timedelta(hours=1), outpass)

        assert isinstance(result, ClassificationError)
        assert result.kind == ClassificationErrorKind.INVALID_STATE
        assert "already has a recorded" in result.message

    def test_when_return_not_after_leave_then_invalid_timestamps(self) -> None:
        """Given expected return equal to leave start, when classifying, then INVALID_TIMESTAMPS."""
        outpass = make_outpass(expected_return_date=LEAVE_START)

        result = classify_for_departure(LEAVE_START, outpass)

        assert isinstance(result, ClassificationError)
        assert result.kind == ClassificationErrorKind.INVALID_TIMESTAMPS


class TestClassifyForReturn:
    """Tests for classify_for_return."""

    def test_when_before_expected_then_on_time(self) -> None:
        """Given now before expected return, when classifying, then on time, no reason needed."""
        result = classify_for_return(EXPECTED_RETURN - timedelta(hours=1), make_active_outpass())

        assert isinstance(result, ReturnClassification)
        assert result.category == ReturnCategory.ON_TIME_RETURN
        assert result.reason_required is False
        assert result.label == "Mark Return"
        assert result.action_enabled is True

    def test_when_late_within_departure_window_then_overdue(self) -> None:
        """Given departure Jan 10 20:00 and now Jan 11 15:00, when classifying, then overdue by 5h."""
        outpass = make_active_outpass(departed=datetime(2024, 1, 10, 20, 0, tzinfo=UTC))

        result = classify_for_return(datetime(2024, 1, 11, 15, 0, tzinfo=UTC), outpass)

        assert isinstance(result, ReturnClassification)
        assert result.category == ReturnCategory.OVERDUE_RETURN
        assert result.lateness.hours_late == 5
        assert result.expiry.is_expired is False
        assert result.reason_required is True
        assert result.status_message == "OVERDUE - Returned 5 hours after expected return"

    def test_dated_scenario_resolves_to_expired_return(self) -> None:
        """Given departure Jan 10 10:00, expected Jan 11 10:00, now Jan 11 15:00, then expired."""
        outpass = make_active_outpass(departed=datetime(2024, 1, 10, 10, 0, tzinfo=UTC))

        result = classify_for_return(datetime(2024, 1, 11, 15, 0, tzinfo=UTC), outpass)

        assert isinstance(result, ReturnClassification)
        assert result.lateness.is_overdue is True
        assert result.lateness.hours_late == 5
        assert result.expiry.is_expired is True
        assert result.expiry.hours_expired == 5
        assert result.category == ReturnCategory.EXPIRED_RETURN
        assert result.label == "Mark Expired Return"
        assert result.status_message == "EXPIRED - Returned 5 hours after 24h departure window"

    def test_expired_takes_precedence_even_when_not_overdue(self) -> None:
        """Given an expired departure window but a far-off expected return, then EXPIRED_RETURN."""
        outpass = make_active_outpass(
            departed=datetime(2024, 1, 10, 10, 0, tzinfo=UTC),
            expected_return_date=datetime(2024, 1, 20, 10, 0, tzinfo=UTC),
        )
        now = datetime(2024, 1, 12, 10, 0, tzinfo=UTC)

        result = classify_for_return(now, outpass)

        assert isinstance(result, ReturnClassification)
        assert result.lateness.is_overdue is False
        assert result.category == ReturnCategory.EXPIRED_RETURN
        assert result.reason_required is True

    @pytest.mark.parametrize("hours_after_departure", [24.5, 26, 30, 48, 100])
    def test_precedence_law(self, hours_after_departure: float) -> None:
        """Given any now past departure + 24h, when classifying, then always EXPIRED_RETURN."""
        departed = datetime(2024, 1, 10, 10, 0, tzinfo=UTC)
        now = departed + timedelta(hours=hours_after_departure)
        outpass = make_active_outpass(departed=departed)

        assert departure_expiry_for_return(now, departed).is_expired is True
        result = classify_for_return(now, outpass)

        assert isinstance(result, ReturnClassification)
        assert result.category == ReturnCategory.EXPIRED_RETURN

    def test_when_not_active_then_invalid_state(self) -> None:
        """Given a completed pass, when classifying for return, then INVALID_STATE."""
        outpass = make_active_outpass(status=OutpassStatus.COMPLETED)

        result = classify_for_return(EXPECTED_RETURN, outpass)

        assert isinstance(result, ClassificationError)
        assert result.kind == ClassificationErrorKind.INVALID_STATE

    def test_when_active_without_departure_then_invalid_state(self) -> None:
        """Given an active pass with no recorded departure, when classifying, then INVALID_STATE."""
        outpass = make_outpass(status=OutpassStatus.ACTIVE)

        result = classify_for_return(EXPECTED_RETURN, outpass)

        assert isinstance(result, ClassificationError)
        assert result.kind == ClassificationErrorKind.INVALID_STATE

    def test_when_already_returned_then_invalid_state(self) -> None:
        """Given a pass with a recorded return, when classifying, then INVALID_STATE."""
        outpass = make_active_outpass(actual_return_time=EXPECTED_RETURN)

        result = classify_for_return(EXPECTED_RETURN, outpass)

        assert isinstance(result, ClassificationError)
        assert result.kind == ClassificationErrorKind.INVALID_STATE

    def test_when_return_before_leave_then_invalid_timestamps(self) -> None:
        """Given expected return before leave start, when classifying, then INVALID_TIMESTAMPS."""
        outpass = make_active_outpass(expected_return_date=LEAVE_START - timedelta(hours=1))

        result = classify_for_return(LEAVE_START, outpass)

        assert isinstance(result, ClassificationError)
        assert result.kind == ClassificationErrorKind.INVALID_TIMESTAMPS


class TestPurity:
    """Classifiers are pure functions of (now, outpass)."""

    @pytest.mark.parametrize("hours", [-30, -5, 0, 5, 23, 30])
    def test_departure_classification_is_idempotent(self, hours: int) -> None:
        """Given identical inputs, when classifying twice, then results are equal."""
        now = LEAVE_START + timedelta(hours=hours)
        outpass = make_outpass()

        assert classify_for_departure(now, outpass) == classify_for_departure(now, outpass)

    @pytest.mark.parametrize("hours", [0, 20, 25, 29, 48])
    def test_return_classification_is_idempotent(self, hours: int) -> None:
        """Given identical inputs, when classifying twice, then results are equal."""
        now = LEAVE_START + timedelta(hours=hours)
        outpass = make_active_outpass()

        assert classify_for_return(now, outpass) == classify_for_return(now, outpass)

    def test_classification_does_not_mutate_outpass(self) -> None:
        """Given an outpass, when classifying, then the snapshot is unchanged."""
        outpass = make_active_outpass()
        snapshot = replace(outpass)

        classify_for_return(EXPECTED_RETURN + timedelta(hours=3), outpass)

        assert outpass == snapshot


class TestNaiveTimestamps:
    """Naive datetimes come back as error values instead of raising."""

    def test_naive_now_for_departure_is_invalid_timestamps(self) -> None:
        """Given a naive now, when classifying for departure, then INVALID_TIMESTAMPS."""
        result = classify_for_departure(datetime(2024, 1, 10, 11, 0), make_outpass())

        assert isinstance(result, ClassificationError)
        assert result.kind == ClassificationErrorKind.INVALID_TIMESTAMPS
        assert "now" in result.message

    def test_naive_leave_start_for_departure_is_invalid_timestamps(self) -> None:
        """Given a naive leave start and an aware now, when classifying, then INVALID_TIMESTAMPS."""
        outpass = make_outpass(
            leave_start_date=datetime(2024, 1, 10, 10, 0),
            expected_return_date=datetime(2024, 1, 11, 10, 0),
        )

        result = classify_for_departure(LEAVE_START, outpass)

        assert isinstance(result, ClassificationError)
        assert result.kind == ClassificationErrorKind.INVALID_TIMESTAMPS

    def test_naive_departure_for_return_is_invalid_timestamps(self) -> None:
        """Given a naive actual departure, when classifying for return, then INVALID_TIMESTAMPS."""
        outpass = make_active_outpass(departed=datetime(2024, 1, 10, 10, 0))

        result = classify_for_return(EXPECTED_RETURN, outpass)

        assert isinstance(result, ClassificationError)
        assert result.kind == ClassificationErrorKind.INVALID_TIMESTAMPS
        assert "actual_departure_time" in result.message
