"""REST implementation of the outpass store port."""

import logging
from typing import Any

from hostel_outpass.adapters.store.constants import (
    ACTIVE_OUTPASSES_PATH,
    APPROVED_OUTPASSES_PATH,
    DEPARTURE_PATH,
    OUTPASS_PATH,
    RETURN_PATH,
    TODAY_ACTIVITY_PATH,
)
from hostel_outpass.adapters.store.http_client import OutpassHttpClient
from hostel_outpass.adapters.store.outpass_parser import OutpassParser
from hostel_outpass.domain.models.error_details import ErrorDetails, OutpassStoreError
from hostel_outpass.domain.models.outpass import Outpass
from hostel_outpass.domain.models.today_activity import TodayActivity
from hostel_outpass.domain.models.transition import DepartureTransition, ReturnTransition
from hostel_outpass.domain.ports.outpass_store import OutpassStore

logger = logging.getLogger(__name__)


class RestOutpassStore(OutpassStore):
    """Outpass store backed by the security REST API."""

    def __init__(self, http_client: OutpassHttpClient, parser: OutpassParser) -> None:
        """Initialize the store.

        Args:
            http_client: Client for the outpass API.
            parser: Parser for outpass records.
        """
        self._http = http_client
        self._parser = parser

    async def get_approved_outpasses(self) -> list[Outpass]:
        """Get outpasses eligible for departure marking."""
        data = await self._http.get_json(APPROVED_OUTPASSES_PATH)
        outpasses = self._parser.parse_outpasses(data or [])
        logger.debug(f"Fetched {len(outpasses)} approved outpasses")
        return outpasses

    async def get_active_outpasses(self) -> list[Outpass]:
        """Get outpasses eligible for return marking."""
        data = await self._http.get_json(ACTIVE_OUTPASSES_PATH)
        outpasses = self._parser.parse_outpasses(data or [])
        logger.debug(f"Fetched {len(outpasses)} active outpasses")
        return outpasses

    async def get_outpass(self, outpass_id: str) -> Outpass | None:
        """Get a single outpass, or None if the store does not know it."""
        try:
            data = await self._http.get_json(OUTPASS_PATH.format(outpass_id=outpass_id))
        except OutpassStoreError as e:
            if e.details.status_code == 404:
                return None
            raise
        if not data:
            return None
        return self._parse_single(data)

    async def mark_departure(self, outpass_id: str, transition: DepartureTransition) -> Outpass | None:
        """Submit a departure transition."""
        data = await self._http.put_json(
            DEPARTURE_PATH.format(outpass_id=outpass_id), transition.to_payload()
        )
        logger.info(f"Marked departure for outpass {outpass_id}")
        return self._parse_optional(data)

    async def mark_return(self, outpass_id: str, transition: ReturnTransition) -> Outpass | None:
        """Submit a return transition."""
        data = await self._http.put_json(
            RETURN_PATH.format(outpass_id=outpass_id), transition.to_payload()
        )
        logger.info(
            f"Marked return for outpass {outpass_id}"
            + (" (late)" if transition.late_return_reason else "")
        )
        return self._parse_optional(data)

    async def get_today_activity(self) -> TodayActivity:
        """Get today's departures, returns and expected returns."""
        data = await self._http.get_json(TODAY_ACTIVITY_PATH)
        return self._parser.parse_today_activity(data)

    def _parse_single(self, data: Any) -> Outpass:
        if not isinstance(data, dict):
            raise OutpassStoreError(ErrorDetails(reason="Malformed outpass record"))
        try:
            return self._parser.parse_outpass(data)
        except ValueError as e:
            raise OutpassStoreError(
                ErrorDetails(reason="Malformed outpass record", message=str(e))
            ) from e

    def _parse_optional(self, data: Any) -> Outpass | None:
        # Transition endpoints may answer with the updated record or nothing useful
        if not isinstance(data, dict):
            return None
        try:
            return self._parser.parse_outpass(data)
        except ValueError as e:
            logger.warning(f"Could not parse updated outpass from transition response: {e}")
            return None
