"""Base class for pollers that refresh gate state on a fixed cadence."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from hostel_outpass.domain.contracts.poller import PollerProtocol
from hostel_outpass.domain.models.error_details import OutpassStoreError

if TYPE_CHECKING:
    from datetime import datetime

    from hostel_outpass.domain.contracts.clock import ClockProtocol
    from hostel_outpass.domain.contracts.state_publisher import StatePublisherProtocol
    from hostel_outpass.domain.contracts.state_updater import StateUpdaterProtocol

logger = logging.getLogger(__name__)


class PeriodicPoller(PollerProtocol, ABC):
    """Refreshes state immediately on start, then every `interval_seconds`.

    A failed refresh keeps the previous snapshot and marks the API status as
    "error"; the loop carries on with the next tick. The publisher, if any,
    is notified after every refresh, failed or not.
    """

    name = "poller"

    def __init__(
        self,
        state_updater: StateUpdaterProtocol,
        clock: ClockProtocol,
        interval_seconds: float,
        state_publisher: StatePublisherProtocol | None = None,
    ) -> None:
        """Initialize the poller.

        Args:
            state_updater: Updater for gate state.
            clock: Source of `now` for classification and timestamps.
            interval_seconds: Seconds to sleep between refreshes.
            state_publisher: Optional publisher notified after every refresh.
        """
        self.state_updater = state_updater
        self.state_publisher = state_publisher
        self.clock = clock
        self.interval_seconds = interval_seconds
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        """Whether the polling task is alive."""
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the poller."""
        if self.running:
            logger.warning(f"{self.name} already running")
            return

        self._task = asyncio.create_task(self._poll_loop())
        logger.info(f"Started {self.name} (every {self.interval_seconds}s)")

    async def stop(self) -> None:
        """Stop the poller."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info(f"{self.name} cancelled")
            logger.info(f"Stopped {self.name}")

    async def _poll_loop(self) -> None:
        await self.refresh_once()
        try:
            while True:
                await asyncio.sleep(self.interval_seconds)
                await self.refresh_once()
        except asyncio.CancelledError:
            logger.info(f"{self.name} cancelled")
            raise

    async def refresh_once(self) -> bool:
        """Run one refresh and record its outcome. Returns True on success."""
        now = self.clock.now()
        try:
            await self._refresh(now)
        except OutpassStoreError as e:
            details = e.details
            logger.error(
                f"{self.name} failed to refresh: {details.reason} "
                f"(status: {details.status_code}, error: {e}); keeping previous snapshot"
            )
            self.state_updater.update_api_status("error")
            self._publish()
            return False
        except Exception:
            logger.exception(f"{self.name} failed unexpectedly; keeping previous snapshot")
            self.state_updater.update_api_status("error")
            self._publish()
            return False

        self.state_updater.update_last_update_time(now)
        self.state_updater.update_api_status("success")
        self._publish()
        return True

    def _publish(self) -> None:
        if self.state_publisher is not None:
            self.state_publisher.publish()

    @abstractmethod
    async def _refresh(self, now: datetime) -> None:
        """Fetch, classify and write one snapshot into the state."""
