"""Domain layer - outpass models, time policy and ports."""

from hostel_outpass.domain.models import (
    Outpass,
    OutpassStatus,
    TodayActivity,
)
from hostel_outpass.domain.ports import OutpassStore

__all__ = [
    "Outpass",
    "OutpassStatus",
    "OutpassStore",
    "TodayActivity",
]
