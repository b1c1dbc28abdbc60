"""Protocol for periodic store polling."""

from typing import Protocol


class PollerProtocol(Protocol):
    """Protocol for polling the store and updating gate state."""

    async def start(self) -> None:
        """Start the poller."""
        ...

    async def stop(self) -> None:
        """Stop the poller."""
        ...
