"""Protocol for publishing refreshed gate state."""

from typing import Protocol


class StatePublisherProtocol(Protocol):
    """Notified by pollers after each refresh so the gate view can be redrawn."""

    def publish(self) -> None:
        """Publish the current gate state."""
        ...
