"""Parser for outpass API responses."""

import logging
from datetime import datetime, tzinfo
from typing import Any

from hostel_outpass.domain.models.outpass import Outpass, OutpassStatus
from hostel_outpass.domain.models.today_activity import TodayActivity

logger = logging.getLogger(__name__)


class OutpassParser:
    """Parses camelCase outpass records into Outpass objects.

    The backend sends local date-times without an offset; those are
    interpreted in the configured timezone.
    """

    def __init__(self, timezone: tzinfo) -> None:
        """Initialize the parser.

        Args:
            timezone: Timezone applied to naive timestamps.
        """
        self.timezone = timezone

    def parse_timestamp(self, value: Any) -> datetime | None:
        """Parse an ISO-8601 timestamp, attaching the configured timezone if naive."""
        if value is None or value == "":
            return None
        if not isinstance(value, str):
            raise ValueError(f"Expected ISO timestamp string, got {type(value).__name__}")
        parsed = datetime.fromisoformat(value)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=self.timezone)
        return parsed

    def _required_timestamp(self, data: dict[str, Any], key: str) -> datetime:
        value = self.parse_timestamp(data.get(key))
        if value is None:
            raise ValueError(f"Missing required field '{key}'")
        return value

    def parse_outpass(self, data: dict[str, Any]) -> Outpass:
        """Parse a single outpass record.

        Raises:
            ValueError: If a required field is missing or malformed.
        """
        outpass_id = data.get("id")
        if outpass_id is None or outpass_id == "":
            raise ValueError("Missing required field 'id'")

        status_value = str(data.get("status", "")).upper()
        try:
            status = OutpassStatus(status_value)
        except ValueError as e:
            raise ValueError(f"Unknown outpass status '{status_value}'") from e

        is_late = data.get("isLateReturn")
        return Outpass(
            id=str(outpass_id),
            status=status,
            leave_start_date=self._required_timestamp(data, "leaveStartDate"),
            expected_return_date=self._required_timestamp(data, "expectedReturnDate"),
            actual_departure_time=self.parse_timestamp(data.get("actualDepartureTime")),
            actual_return_time=self.parse_timestamp(data.get("actualReturnTime")),
            student_name=data.get("studentName"),
            student_roll_number=data.get("studentRollNumber"),
            destination=data.get("destination"),
            reason=data.get("reason"),
            is_late_return=bool(is_late) if is_late is not None else None,
        )

    def parse_outpasses(self, records: Any) -> list[Outpass]:
        """Parse a list of records, skipping malformed ones."""
        if not isinstance(records, list):
            logger.warning(f"Expected a list of outpasses, got {type(records).__name__}")
            return []

        results = []
        for record in records:
            if not isinstance(record, dict):
                continue
            try:
                results.append(self.parse_outpass(record))
            except ValueError as e:
                logger.warning(f"Skipping malformed outpass record {record.get('id')}: {e}")
        return results

    def parse_today_activity(self, data: Any) -> TodayActivity:
        """Parse the today's activity response."""
        if not isinstance(data, dict):
            logger.warning(f"Expected today's activity object, got {type(data).__name__}")
            return TodayActivity()
        return TodayActivity(
            departures_today=self.parse_outpasses(data.get("departuresToday") or []),
            returns_today=self.parse_outpasses(data.get("returnsToday") or []),
            expected_returns=self.parse_outpasses(data.get("expectedReturns") or []),
        )
