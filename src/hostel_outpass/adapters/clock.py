"""System clock adapter."""

from datetime import UTC, datetime

from hostel_outpass.domain.contracts.clock import ClockProtocol


class SystemClock(ClockProtocol):
    """Reads the wall clock in UTC."""

    def now(self) -> datetime:
        """Return the current UTC time."""
        return datetime.now(UTC)
