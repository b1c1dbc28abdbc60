"""Gate state dataclass."""

from dataclasses import dataclass, field
from datetime import datetime

from hostel_outpass.domain.models.board_entry import DepartureBoardEntry, ReturnBoardEntry
from hostel_outpass.domain.models.today_activity import TodayActivity


@dataclass
class GateState:
    """Latest classified snapshot of the security desk boards."""

    departure_board: list[DepartureBoardEntry] = field(default_factory=list)
    return_board: list[ReturnBoardEntry] = field(default_factory=list)
    today_activity: TodayActivity | None = None
    last_update: datetime | None = None
    api_status: str = "unknown"
