"""Domain models for hostel outpass gate checks."""

from hostel_outpass.domain.models.board_entry import (
    DepartureBoardEntry,
    DepartureStats,
    ReturnBoardEntry,
    ReturnStats,
)
from hostel_outpass.domain.models.classification import (
    ClassificationError,
    ClassificationErrorKind,
    DepartureClassification,
    DepartureStatus,
    ReturnCategory,
    ReturnClassification,
)
from hostel_outpass.domain.models.error_details import ErrorDetails, OutpassStoreError
from hostel_outpass.domain.models.outpass import Outpass, OutpassStatus
from hostel_outpass.domain.models.time_window import (
    DepartureWindow,
    ExpiryInfo,
    LatenessInfo,
    WindowState,
)
from hostel_outpass.domain.models.today_activity import TodayActivity
from hostel_outpass.domain.models.transition import DepartureTransition, ReturnTransition
from hostel_outpass.domain.models.transition_result import TransitionResult

__all__ = [
    "ClassificationError",
    "ClassificationErrorKind",
    "DepartureBoardEntry",
    "DepartureClassification",
    "DepartureStats",
    "DepartureStatus",
    "DepartureTransition",
    "DepartureWindow",
    "ErrorDetails",
    "ExpiryInfo",
    "LatenessInfo",
    "Outpass",
    "OutpassStatus",
    "OutpassStoreError",
    "ReturnBoardEntry",
    "ReturnCategory",
    "ReturnClassification",
    "ReturnStats",
    "ReturnTransition",
    "TodayActivity",
    "TransitionResult",
    "WindowState",
]
