"""HTTP client for the outpass security API.

Responses come either wrapped as {"success": ..., "data": ..., "message": ...}
or as bare JSON; both are accepted.
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from hostel_outpass.adapters.api_request_logger import log_api_request
from hostel_outpass.adapters.store.constants import DEFAULT_HEADERS, STATUS_REASONS
from hostel_outpass.domain.models.error_details import ErrorDetails, OutpassStoreError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

    from hostel_outpass.adapters.config.app_config import AppConfig


def _reason_for_status(status: int) -> str:
    return STATUS_REASONS.get(status, f"HTTP {status}")


def unwrap_envelope(body: Any) -> Any:
    """Return the payload of an API response, unwrapping the success envelope.

    Raises:
        OutpassStoreError: If the envelope reports success=false.
    """
    if isinstance(body, dict) and "success" in body:
        if not body.get("success"):
            message = body.get("message") or "Request failed"
            raise OutpassStoreError(ErrorDetails(reason="Request rejected", message=message))
        return body.get("data")
    return body


class OutpassHttpClient:
    """HTTP client for outpass API requests."""

    def __init__(self, session: "ClientSession", config: "AppConfig") -> None:
        """Initialize the client.

        Args:
            session: Shared aiohttp session.
            config: Application configuration with base URL, timeout and token.
        """
        self._session = session
        self._base_url = config.api_base_url
        self._timeout = aiohttp.ClientTimeout(total=config.api_timeout_seconds)
        self._headers = dict(DEFAULT_HEADERS)
        if config.api_token:
            self._headers["Authorization"] = f"Bearer {config.api_token}"
        else:
            logger.warning("No API token configured; requests are sent unauthenticated")

    def url_for(self, path: str) -> str:
        """Build the absolute URL for an API path."""
        return f"{self._base_url}{path}"

    async def _error_from_response(self, response: "ClientResponse", url: str) -> OutpassStoreError:
        message: str | None = None
        try:
            body = await response.json(content_type=None)
            if isinstance(body, dict):
                message = body.get("message") or body.get("error")
        except (aiohttp.ContentTypeError, ValueError):
            text = await response.text()
            message = text[:200] if text else None

        details = ErrorDetails(
            status_code=response.status,
            reason=_reason_for_status(response.status),
            message=message,
        )
        logger.error(
            f"Outpass API returned status {response.status} for {url}: "
            f"{details.reason} ({message or 'no message'})"
        )
        return OutpassStoreError(details)

    async def _handle_response(self, response: "ClientResponse", method: str, url: str) -> Any:
        if not 200 <= response.status < 300:
            raise await self._error_from_response(response, url)
        try:
            body = await response.json(content_type=None)
        except ValueError as e:
            if method == "PUT":
                # The transition was applied; only the echoed record is unusable
                logger.warning(f"Non-JSON body from {method} {url}; no updated record returned")
                return None
            raise OutpassStoreError(
                ErrorDetails(
                    status_code=response.status, reason="Malformed response", message=str(e)
                )
            ) from e
        return unwrap_envelope(body)

    async def _request(self, method: str, path: str, payload: Any = None) -> Any:
        url = self.url_for(path)
        log_api_request(
            method, url, authenticated="Authorization" in self._headers, payload=payload
        )

        try:
            async with self._session.request(
                method, url, json=payload, headers=self._headers, timeout=self._timeout
            ) as response:
                return await self._handle_response(response, method, url)
        except asyncio.TimeoutError as e:
            logger.warning(f"Timeout calling outpass API {method} {url}")
            raise OutpassStoreError(ErrorDetails(reason="Request timed out")) from e
        except aiohttp.ClientError as e:
            logger.warning(f"Network error calling outpass API {method} {url}: {e}")
            raise OutpassStoreError(ErrorDetails(reason="Network error", message=str(e))) from e

    async def get_json(self, path: str) -> Any:
        """GET a path and return its unwrapped payload."""
        return await self._request("GET", path)

    async def put_json(self, path: str, payload: dict[str, Any]) -> Any:
        """PUT a JSON payload to a path and return its unwrapped payload."""
        return await self._request("PUT", path, payload)
