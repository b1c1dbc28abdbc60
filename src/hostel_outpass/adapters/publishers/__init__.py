"""Publishers for refreshed gate state."""

from hostel_outpass.adapters.publishers.console_publisher import ConsoleStatePublisher

__all__ = ["ConsoleStatePublisher"]
