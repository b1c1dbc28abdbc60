"""Shared gate state."""

from hostel_outpass.adapters.state.gate_state import GateState

__all__ = ["GateState"]
