"""State updaters."""

from hostel_outpass.adapters.updaters.state_updater import GateStateUpdater

__all__ = ["GateStateUpdater"]
