"""Outpass domain model."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class OutpassStatus(str, Enum):
    """Lifecycle status of an outpass as stored by the backend."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    EXPIRED = "EXPIRED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class Outpass:
    """Read-only projection of an outpass record relevant to gate checks."""

    id: str
    status: OutpassStatus
    leave_start_date: datetime
    expected_return_date: datetime
    actual_departure_time: datetime | None = None
    actual_return_time: datetime | None = None
    student_name: str | None = None
    student_roll_number: str | None = None
    destination: str | None = None
    reason: str | None = None
    is_late_return: bool | None = None  # Server-computed, only on today's returns

    @property
    def has_departed(self) -> bool:
        """Whether a departure has been recorded."""
        return self.actual_departure_time is not None

    @property
    def has_returned(self) -> bool:
        """Whether a return has been recorded (terminal)."""
        return self.actual_return_time is not None
