"""Outpass lifecycle time policy: pure functions of (now, outpass)."""

from hostel_outpass.domain.policy.board_stats import (
    departure_stats,
    filter_board,
    return_stats,
)
from hostel_outpass.domain.policy.outpass_classifier import (
    classify_for_departure,
    classify_for_return,
)
from hostel_outpass.domain.policy.time_window_policy import (
    departure_expiry_for_return,
    departure_window,
    return_lateness,
)
from hostel_outpass.domain.policy.transitions import (
    build_departure_transition,
    build_return_transition,
)

__all__ = [
    "build_departure_transition",
    "build_return_transition",
    "classify_for_departure",
    "classify_for_return",
    "departure_expiry_for_return",
    "departure_stats",
    "departure_window",
    "filter_board",
    "return_lateness",
    "return_stats",
]
