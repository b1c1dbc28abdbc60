"""Publisher that redraws the gate boards on a text stream."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from hostel_outpass.domain.contracts.state_publisher import StatePublisherProtocol

if TYPE_CHECKING:
    from hostel_outpass.adapters.formatters.board_formatter import BoardFormatter
    from hostel_outpass.adapters.state.gate_state import GateState
    from hostel_outpass.domain.contracts.clock import ClockProtocol

logger = logging.getLogger(__name__)


class ConsoleStatePublisher(StatePublisherProtocol):
    """Writes a full snapshot of the gate state after every refresh."""

    def __init__(
        self,
        gate_state: GateState,
        formatter: BoardFormatter,
        clock: ClockProtocol,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize the publisher.

        Args:
            gate_state: State written by the pollers.
            formatter: Formatter for boards and activity.
            clock: Source of `now` for elapsed-time displays.
            stream: Output stream, stdout when omitted.
        """
        self.gate_state = gate_state
        self.formatter = formatter
        self.clock = clock
        self.stream = stream

    def publish(self) -> None:
        """Write the current gate state to the stream."""
        stream = self.stream or sys.stdout
        stream.write(self.formatter.format_gate_state(self.gate_state, self.clock.now()))
        stream.write("\n\n")
        stream.flush()
        logger.debug(f"Published gate state ({self.gate_state.api_status})")
