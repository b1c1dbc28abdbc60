"""Board entry domain models."""

from dataclasses import dataclass

from hostel_outpass.domain.models.classification import (
    ClassificationError,
    DepartureClassification,
    ReturnClassification,
)
from hostel_outpass.domain.models.outpass import Outpass


@dataclass(frozen=True)
class DepartureBoardEntry:
    """An approved pass with its departure classification."""

    outpass: Outpass
    classification: DepartureClassification | ClassificationError


@dataclass(frozen=True)
class ReturnBoardEntry:
    """An active pass with its return classification."""

    outpass: Outpass
    classification: ReturnClassification | ClassificationError


@dataclass(frozen=True)
class DepartureStats:
    """Counts of approved passes by departure availability."""

    valid: int = 0
    too_early: int = 0
    expired: int = 0
    invalid: int = 0

    @property
    def not_available(self) -> int:
        """Passes whose departure cannot be marked right now."""
        return self.too_early + self.expired


@dataclass(frozen=True)
class ReturnStats:
    """Counts of active passes by return category."""

    on_time: int = 0
    overdue: int = 0
    expired: int = 0
    invalid: int = 0

    @property
    def late(self) -> int:
        """Passes whose return needs a reason."""
        return self.overdue + self.expired
