"""Gate service port."""

from datetime import datetime
from typing import Protocol

from hostel_outpass.domain.models.board_entry import DepartureBoardEntry, ReturnBoardEntry
from hostel_outpass.domain.models.today_activity import TodayActivity
from hostel_outpass.domain.models.transition_result import TransitionResult


class OutpassGateServicePort(Protocol):
    """Port for the security desk use cases consumed by pollers and the CLI."""

    async def get_departure_board(self, now: datetime | None = None) -> list[DepartureBoardEntry]:
        """Get approved passes classified for departure."""
        ...

    async def get_return_board(self, now: datetime | None = None) -> list[ReturnBoardEntry]:
        """Get active passes classified for return."""
        ...

    async def get_today_activity(self) -> TodayActivity:
        """Get today's gate activity."""
        ...

    async def mark_departure(
        self, outpass_id: str, comments: str | None = None, now: datetime | None = None
    ) -> TransitionResult:
        """Mark the departure of an outpass."""
        ...

    async def mark_return(
        self,
        outpass_id: str,
        comments: str | None = None,
        late_return_reason: str | None = None,
        now: datetime | None = None,
    ) -> TransitionResult:
        """Mark the return of an outpass."""
        ...
