"""Pollers that keep gate state fresh."""

from hostel_outpass.adapters.pollers.activity_poller import TodayActivityPoller
from hostel_outpass.adapters.pollers.board_poller import OutpassBoardPoller
from hostel_outpass.adapters.pollers.periodic_poller import PeriodicPoller

__all__ = ["OutpassBoardPoller", "PeriodicPoller", "TodayActivityPoller"]
