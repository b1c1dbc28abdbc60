"""Formatter for classified boards and today's activity."""

from datetime import datetime
from typing import Any

from hostel_outpass.adapters.config.app_config import AppConfig
from hostel_outpass.adapters.state.gate_state import GateState
from hostel_outpass.domain.models import (
    ClassificationError,
    DepartureBoardEntry,
    Outpass,
    ReturnBoardEntry,
    TodayActivity,
)
from hostel_outpass.domain.policy.board_stats import departure_stats, return_stats
from hostel_outpass.domain.policy.time_window_policy import time_since


class BoardFormatter:
    """Formats board entries for the terminal and for JSON output."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with the display timezone.
        """
        self.config = config

    def format_timestamp(self, value: datetime | None) -> str:
        """Format a timestamp in the configured timezone, or 'N/A'."""
        if value is None:
            return "N/A"
        return value.astimezone(self.config.tzinfo).strftime("%d %b %Y, %I:%M %p")

    @staticmethod
    def _student(outpass: Outpass) -> str:
        name = outpass.student_name or "Unknown student"
        if outpass.student_roll_number:
            return f"{name} ({outpass.student_roll_number})"
        return name

    def format_departure_entry(self, entry: DepartureBoardEntry) -> str:
        """Format an approved pass with its departure availability."""
        outpass = entry.outpass
        classification = entry.classification
        header = f"[{outpass.id}] {self._student(outpass)} -> {outpass.destination or 'N/A'}"
        leave = f"    Leave: {self.format_timestamp(outpass.leave_start_date)}"

        if isinstance(classification, ClassificationError):
            return f"{header}\n{leave}\n    ! {classification.kind.value}: {classification.message}"

        status = classification.label
        if classification.detail:
            status = f"{status} - {classification.detail}"
        if classification.urgent:
            status = f"{status} (URGENT)"
        marker = "+" if classification.action_enabled else "x"
        return f"{header}\n{leave}\n    {marker} {status}"

    def format_return_entry(self, entry: ReturnBoardEntry, now: datetime) -> str:
        """Format an active pass with its return category."""
        outpass = entry.outpass
        classification = entry.classification
        header = f"[{outpass.id}] {self._student(outpass)} -> {outpass.destination or 'N/A'}"
        departed = f"    Departed: {self.format_timestamp(outpass.actual_departure_time)}"
        if outpass.actual_departure_time is not None:
            departed = f"{departed} ({time_since(now, outpass.actual_departure_time)})"
        expected = f"    Expected return: {self.format_timestamp(outpass.expected_return_date)}"

        if isinstance(classification, ClassificationError):
            return (
                f"{header}\n{departed}\n{expected}\n"
                f"    ! {classification.kind.value}: {classification.message}"
            )

        status = classification.label
        if classification.status_message:
            status = f"{status} - {classification.status_message}"
        return f"{header}\n{departed}\n{expected}\n    {status}"

    def format_today_activity(self, activity: TodayActivity) -> str:
        """Format today's activity as three sections."""
        lines = [f"Departures today ({len(activity.departures_today)}):"]
        for outpass in activity.departures_today:
            lines.append(
                f"  {self._student(outpass)} at {self.format_timestamp(outpass.actual_departure_time)}"
            )

        lines.append(
            f"Returns today ({len(activity.returns_today)}, {activity.late_returns} late):"
        )
        for outpass in activity.returns_today:
            late = " [LATE]" if outpass.is_late_return else ""
            lines.append(
                f"  {self._student(outpass)} at "
                f"{self.format_timestamp(outpass.actual_return_time)}{late}"
            )

        lines.append(f"Expected returns ({len(activity.expected_returns)}):")
        for outpass in activity.expected_returns:
            lines.append(
                f"  {self._student(outpass)} by {self.format_timestamp(outpass.expected_return_date)}"
            )
        return "\n".join(lines)

    def format_gate_state(self, state: GateState, now: datetime) -> str:
        """Format the whole gate state as refreshed by the pollers."""
        header = f"Gate desk - updated {self.format_timestamp(state.last_update)}"
        if state.api_status == "error":
            header = f"{header} [API ERROR: showing last good snapshot]"
        sections = [header, "=" * 60]

        dep = departure_stats(state.departure_board)
        sections.append(
            f"Departures: {dep.valid} markable, {dep.too_early} too early, "
            f"{dep.expired} expired, {dep.invalid} invalid"
        )
        sections.extend(self.format_departure_entry(entry) for entry in state.departure_board)

        ret = return_stats(state.return_board)
        sections.append(
            f"Students out: {len(state.return_board)} ({ret.on_time} on time, "
            f"{ret.overdue} overdue, {ret.expired} expired)"
        )
        sections.extend(self.format_return_entry(entry, now) for entry in state.return_board)

        if state.today_activity is not None:
            sections.append(self.format_today_activity(state.today_activity))
        return "\n".join(sections)

    @staticmethod
    def outpass_to_dict(outpass: Outpass) -> dict[str, Any]:
        """Convert an outpass to a camelCase JSON-friendly dict."""

        def iso(value: datetime | None) -> str | None:
            return value.isoformat() if value is not None else None

        return {
            "id": outpass.id,
            "status": outpass.status.value,
            "studentName": outpass.student_name,
            "studentRollNumber": outpass.student_roll_number,
            "destination": outpass.destination,
            "leaveStartDate": iso(outpass.leave_start_date),
            "expectedReturnDate": iso(outpass.expected_return_date),
            "actualDepartureTime": iso(outpass.actual_departure_time),
            "actualReturnTime": iso(outpass.actual_return_time),
        }

    def departure_entry_to_dict(self, entry: DepartureBoardEntry) -> dict[str, Any]:
        """Convert a departure board entry to a JSON-friendly dict."""
        result = self.outpass_to_dict(entry.outpass)
        classification = entry.classification
        if isinstance(classification, ClassificationError):
            result["error"] = {"kind": classification.kind.value, "message": classification.message}
            return result
        remaining = classification.window.remaining
        result["classification"] = {
            "status": classification.status.value,
            "window": classification.window.window.value,
            "remainingSeconds": int(remaining.total_seconds()) if remaining is not None else None,
            "actionEnabled": classification.action_enabled,
            "label": classification.label,
            "detail": classification.detail,
            "urgent": classification.urgent,
        }
        return result

    def return_entry_to_dict(self, entry: ReturnBoardEntry) -> dict[str, Any]:
        """Convert a return board entry to a JSON-friendly dict."""
        result = self.outpass_to_dict(entry.outpass)
        classification = entry.classification
        if isinstance(classification, ClassificationError):
            result["error"] = {"kind": classification.kind.value, "message": classification.message}
            return result
        result["classification"] = {
            "category": classification.category.value,
            "isOverdue": classification.lateness.is_overdue,
            "hoursLate": classification.lateness.hours_late,
            "isExpired": classification.expiry.is_expired,
            "hoursExpired": classification.expiry.hours_expired,
            "reasonRequired": classification.reason_required,
            "label": classification.label,
            "statusMessage": classification.status_message,
        }
        return result
