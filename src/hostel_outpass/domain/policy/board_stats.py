"""Board statistics and search over classified boards."""

from typing import TypeVar

from hostel_outpass.domain.models.board_entry import (
    DepartureBoardEntry,
    DepartureStats,
    ReturnBoardEntry,
    ReturnStats,
)
from hostel_outpass.domain.models.classification import (
    ClassificationError,
    DepartureStatus,
    ReturnCategory,
)

EntryT = TypeVar("EntryT", DepartureBoardEntry, ReturnBoardEntry)


def departure_stats(board: list[DepartureBoardEntry]) -> DepartureStats:
    """Count approved passes by departure availability."""
    valid = too_early = expired = invalid = 0
    for entry in board:
        classification = entry.classification
        if isinstance(classification, ClassificationError):
            invalid += 1
        elif classification.status == DepartureStatus.TOO_EARLY:
            too_early += 1
        elif classification.status == DepartureStatus.EXPIRED:
            expired += 1
        else:
            valid += 1
    return DepartureStats(valid=valid, too_early=too_early, expired=expired, invalid=invalid)


def return_stats(board: list[ReturnBoardEntry]) -> ReturnStats:
    """Count active passes by return category."""
    on_time = overdue = expired = invalid = 0
    for entry in board:
        classification = entry.classification
        if isinstance(classification, ClassificationError):
            invalid += 1
        elif classification.category == ReturnCategory.EXPIRED_RETURN:
            expired += 1
        elif classification.category == ReturnCategory.OVERDUE_RETURN:
            overdue += 1
        else:
            on_time += 1
    return ReturnStats(on_time=on_time, overdue=overdue, expired=expired, invalid=invalid)


def filter_board(board: list[EntryT], term: str | None) -> list[EntryT]:
    """Case-insensitive search on student name or roll number."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(board)
    return [
        entry
        for entry in board
        if needle in (entry.outpass.student_name or "").lower()
        or needle in (entry.outpass.student_roll_number or "").lower()
    ]
