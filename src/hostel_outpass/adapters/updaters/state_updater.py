"""Updater for gate state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hostel_outpass.adapters.state.gate_state import (
    GateState,  # noqa: TC001 - Runtime dependency: used in __init__
)
from hostel_outpass.domain.contracts.state_updater import StateUpdaterProtocol

if TYPE_CHECKING:
    from datetime import datetime

    from hostel_outpass.domain.models.board_entry import DepartureBoardEntry, ReturnBoardEntry
    from hostel_outpass.domain.models.today_activity import TodayActivity

logger = logging.getLogger(__name__)


class GateStateUpdater(StateUpdaterProtocol):
    """Updates gate state."""

    def __init__(self, gate_state: GateState) -> None:
        """Initialize the state updater.

        Args:
            gate_state: The GateState instance to update.
        """
        self.gate_state = gate_state

    def update_departure_board(self, entries: list[DepartureBoardEntry]) -> None:
        """Replace the departure board."""
        self.gate_state.departure_board = entries
        logger.debug(f"Updated departure board: {len(entries)} passes")

    def update_return_board(self, entries: list[ReturnBoardEntry]) -> None:
        """Replace the return board."""
        self.gate_state.return_board = entries
        logger.debug(f"Updated return board: {len(entries)} passes")

    def update_today_activity(self, activity: TodayActivity) -> None:
        """Replace today's activity snapshot."""
        self.gate_state.today_activity = activity
        logger.debug(
            f"Updated today's activity: {len(activity.departures_today)} departures, "
            f"{len(activity.returns_today)} returns"
        )

    def update_api_status(self, status: str) -> None:
        """Update the API status in the state."""
        self.gate_state.api_status = status
        logger.debug(f"Updated API status: {status}")

    def update_last_update_time(self, time: datetime) -> None:
        """Update the last update timestamp in the state."""
        self.gate_state.last_update = time
        logger.debug(f"Updated last update time: {time}")
