"""Outpass store port."""

from typing import Protocol

from hostel_outpass.domain.models.outpass import Outpass
from hostel_outpass.domain.models.today_activity import TodayActivity
from hostel_outpass.domain.models.transition import DepartureTransition, ReturnTransition


class OutpassStore(Protocol):
    """Port for reading outpasses and submitting gate transitions.

    The store stamps departure and return times with its own clock and
    resolves concurrent transitions (first one wins).
    """

    async def get_approved_outpasses(self) -> list[Outpass]:
        """Get outpasses eligible for departure marking."""
        ...

    async def get_active_outpasses(self) -> list[Outpass]:
        """Get outpasses eligible for return marking."""
        ...

    async def get_outpass(self, outpass_id: str) -> Outpass | None:
        """Get a single outpass, or None if it does not exist."""
        ...

    async def mark_departure(self, outpass_id: str, transition: DepartureTransition) -> Outpass | None:
        """Submit a departure transition and return the updated pass if sent back."""
        ...

    async def mark_return(self, outpass_id: str, transition: ReturnTransition) -> Outpass | None:
        """Submit a return transition and return the updated pass if sent back."""
        ...

    async def get_today_activity(self) -> TodayActivity:
        """Get today's departures, returns and expected returns."""
        ...
