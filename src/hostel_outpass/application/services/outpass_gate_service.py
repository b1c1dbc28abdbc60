"""Security desk use cases: classified boards and gate transitions."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from hostel_outpass.domain.models import (
    ClassificationError,
    ClassificationErrorKind,
    DepartureBoardEntry,
    DepartureStats,
    Outpass,
    OutpassStoreError,
    ReturnBoardEntry,
    ReturnStats,
    TodayActivity,
    TransitionResult,
)
from hostel_outpass.domain.ports.gate_service import OutpassGateServicePort
from hostel_outpass.domain.policy import (
    build_departure_transition,
    build_return_transition,
    classify_for_departure,
    classify_for_return,
    departure_stats,
    filter_board,
    return_stats,
)
from hostel_outpass.domain.policy.board_stats import EntryT

if TYPE_CHECKING:
    from hostel_outpass.domain.contracts.clock import ClockProtocol
    from hostel_outpass.domain.ports import OutpassStore

logger = logging.getLogger(__name__)


class OutpassGateService(OutpassGateServicePort):
    """Classifies store snapshots and submits gate transitions.

    `now` is read from the clock only when a caller does not pass one.
    """

    def __init__(self, store: "OutpassStore", clock: "ClockProtocol") -> None:
        """Initialize with an outpass store and a clock."""
        self.store = store
        self.clock = clock

    def _now(self, now: datetime | None) -> datetime:
        return now if now is not None else self.clock.now()

    async def get_departure_board(self, now: datetime | None = None) -> list[DepartureBoardEntry]:
        """Fetch approved passes and classify each for departure."""
        now = self._now(now)
        outpasses = await self.store.get_approved_outpasses()
        entries = [
            DepartureBoardEntry(outpass=outpass, classification=classify_for_departure(now, outpass))
            for outpass in outpasses
        ]
        for entry in entries:
            if isinstance(entry.classification, ClassificationError):
                logger.warning(f"Departure board: {entry.classification.message}")
        return entries

    async def get_return_board(self, now: datetime | None = None) -> list[ReturnBoardEntry]:
        """Fetch active passes and classify each for return."""
        now = self._now(now)
        outpasses = await self.store.get_active_outpasses()
        entries = [
            ReturnBoardEntry(outpass=outpass, classification=classify_for_return(now, outpass))
            for outpass in outpasses
        ]
        for entry in entries:
            if isinstance(entry.classification, ClassificationError):
                logger.warning(f"Return board: {entry.classification.message}")
        return entries

    @staticmethod
    def departure_stats(board: list[DepartureBoardEntry]) -> DepartureStats:
        """Count a departure board by availability."""
        return departure_stats(board)

    @staticmethod
    def return_stats(board: list[ReturnBoardEntry]) -> ReturnStats:
        """Count a return board by category."""
        return return_stats(board)

    @staticmethod
    def filter_board(board: list[EntryT], term: str | None) -> list[EntryT]:
        """Search a board by student name or roll number."""
        return filter_board(board, term)

    async def get_today_activity(self) -> TodayActivity:
        """Fetch today's departures, returns and expected returns."""
        return await self.store.get_today_activity()

    async def mark_departure(
        self, outpass_id: str, comments: str | None = None, now: datetime | None = None
    ) -> TransitionResult:
        """Re-fetch an outpass, then submit its departure."""
        outpass, failure = await self._refetch(outpass_id)
        if failure is not None:
            return failure
        return await self.submit_departure(outpass, comments, now)

    async def mark_return(
        self,
        outpass_id: str,
        comments: str | None = None,
        late_return_reason: str | None = None,
        now: datetime | None = None,
    ) -> TransitionResult:
        """Re-fetch an outpass, then submit its return."""
        outpass, failure = await self._refetch(outpass_id)
        if failure is not None:
            return failure
        return await self.submit_return(outpass, comments, late_return_reason, now)

    async def submit_departure(
        self, outpass: Outpass, comments: str | None = None, now: datetime | None = None
    ) -> TransitionResult:
        """Submit a departure for a snapshot, unless its window is closed."""
        transition = build_departure_transition(self._now(now), outpass, comments)
        if isinstance(transition, ClassificationError):
            return self._rejected("Departure", outpass, transition)

        try:
            updated = await self.store.mark_departure(outpass.id, transition)
        except OutpassStoreError as e:
            return self._store_failure("Failed to mark departure", e, outpass)
        return TransitionResult(
            success=True, message="Departure marked successfully", outpass=updated or outpass
        )

    async def submit_return(
        self,
        outpass: Outpass,
        comments: str | None = None,
        late_return_reason: str | None = None,
        now: datetime | None = None,
    ) -> TransitionResult:
        """Submit a return for a snapshot.

        Overdue and expired returns without a reason are rejected before the
        store is called.
        """
        transition = build_return_transition(self._now(now), outpass, comments, late_return_reason)
        if isinstance(transition, ClassificationError):
            return self._rejected("Return", outpass, transition)

        try:
            updated = await self.store.mark_return(outpass.id, transition)
        except OutpassStoreError as e:
            return self._store_failure("Failed to mark return", e, outpass)
        return TransitionResult(
            success=True, message="Return marked successfully", outpass=updated or outpass
        )

    async def _refetch(self, outpass_id: str) -> tuple[Outpass | None, TransitionResult | None]:
        try:
            outpass = await self.store.get_outpass(outpass_id)
        except OutpassStoreError as e:
            return None, self._store_failure("Failed to fetch outpass", e)
        if outpass is None:
            error = ClassificationError(
                ClassificationErrorKind.INVALID_STATE, f"Outpass {outpass_id} not found"
            )
            return None, TransitionResult(success=False, message=error.message, error=error)
        return outpass, None

    @staticmethod
    def _rejected(action: str, outpass: Outpass, error: ClassificationError) -> TransitionResult:
        logger.info(f"{action} for outpass {outpass.id} rejected locally: {error.message}")
        return TransitionResult(success=False, message=error.message, outpass=outpass, error=error)

    @staticmethod
    def _store_failure(
        prefix: str, error: OutpassStoreError, outpass: Outpass | None = None
    ) -> TransitionResult:
        details = error.details
        if details.is_conflict:
            logger.warning(f"{prefix}: outpass was already updated by another officer")
        else:
            logger.error(f"{prefix}: {details.reason} (status: {details.status_code})")
        return TransitionResult(
            success=False,
            message=f"{prefix}: {details.message or details.reason}",
            outpass=outpass,
            store_error=details,
        )
