"""Today's gate activity domain model."""

from dataclasses import dataclass, field

from hostel_outpass.domain.models.outpass import Outpass


@dataclass(frozen=True)
class TodayActivity:
    """Departures, returns and expected returns for the current day."""

    departures_today: list[Outpass] = field(default_factory=list)
    returns_today: list[Outpass] = field(default_factory=list)
    expected_returns: list[Outpass] = field(default_factory=list)

    @property
    def late_returns(self) -> int:
        """Number of today's returns the store flagged as late."""
        return sum(1 for outpass in self.returns_today if outpass.is_late_return)
