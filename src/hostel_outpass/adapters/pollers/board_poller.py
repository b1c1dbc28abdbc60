"""Poller for the approved and active outpass boards."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hostel_outpass.adapters.pollers.periodic_poller import PeriodicPoller
from hostel_outpass.domain.policy.board_stats import departure_stats, return_stats

if TYPE_CHECKING:
    from datetime import datetime

    from hostel_outpass.domain.contracts.clock import ClockProtocol
    from hostel_outpass.domain.contracts.state_publisher import StatePublisherProtocol
    from hostel_outpass.domain.contracts.state_updater import StateUpdaterProtocol
    from hostel_outpass.domain.ports.gate_service import OutpassGateServicePort

logger = logging.getLogger(__name__)


class OutpassBoardPoller(PeriodicPoller):
    """Refreshes and re-classifies the departure and return boards."""

    name = "outpass board poller"

    def __init__(
        self,
        gate_service: OutpassGateServicePort,
        state_updater: StateUpdaterProtocol,
        clock: ClockProtocol,
        interval_seconds: float = 30,
        state_publisher: StatePublisherProtocol | None = None,
    ) -> None:
        """Initialize the board poller.

        Args:
            gate_service: Service that fetches and classifies boards.
            state_updater: Updater for gate state.
            clock: Source of `now`.
            interval_seconds: Seconds between refreshes.
            state_publisher: Optional publisher notified after every refresh.
        """
        super().__init__(state_updater, clock, interval_seconds, state_publisher)
        self.gate_service = gate_service

    async def _refresh(self, now: datetime) -> None:
        departure_board = await self.gate_service.get_departure_board(now)
        return_board = await self.gate_service.get_return_board(now)

        self.state_updater.update_departure_board(departure_board)
        self.state_updater.update_return_board(return_board)

        dep_stats = departure_stats(departure_board)
        ret_stats = return_stats(return_board)
        logger.info(
            f"Boards refreshed: {dep_stats.valid} departures markable "
            f"({dep_stats.too_early} too early, {dep_stats.expired} expired), "
            f"{len(return_board)} out ({ret_stats.overdue} overdue, "
            f"{ret_stats.expired} expired)"
        )
