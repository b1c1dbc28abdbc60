"""Poller for today's gate activity."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hostel_outpass.adapters.pollers.periodic_poller import PeriodicPoller

if TYPE_CHECKING:
    from datetime import datetime

    from hostel_outpass.domain.contracts.clock import ClockProtocol
    from hostel_outpass.domain.contracts.state_publisher import StatePublisherProtocol
    from hostel_outpass.domain.contracts.state_updater import StateUpdaterProtocol
    from hostel_outpass.domain.ports.gate_service import OutpassGateServicePort

logger = logging.getLogger(__name__)


class TodayActivityPoller(PeriodicPoller):
    """Refreshes today's departures, returns and expected returns."""

    name = "today activity poller"

    def __init__(
        self,
        gate_service: OutpassGateServicePort,
        state_updater: StateUpdaterProtocol,
        clock: ClockProtocol,
        interval_seconds: float = 60,
        state_publisher: StatePublisherProtocol | None = None,
    ) -> None:
        """Initialize the activity poller."""
        super().__init__(state_updater, clock, interval_seconds, state_publisher)
        self.gate_service = gate_service

    async def _refresh(self, now: datetime) -> None:  # noqa: ARG002
        activity = await self.gate_service.get_today_activity()
        self.state_updater.update_today_activity(activity)
        logger.info(
            f"Today's activity refreshed: {len(activity.departures_today)} departures, "
            f"{len(activity.returns_today)} returns ({activity.late_returns} late), "
            f"{len(activity.expected_returns)} expected"
        )
