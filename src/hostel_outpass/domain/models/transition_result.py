"""Transition result domain model."""

from dataclasses import dataclass

from hostel_outpass.domain.models.classification import ClassificationError
from hostel_outpass.domain.models.error_details import ErrorDetails
from hostel_outpass.domain.models.outpass import Outpass


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of a departure or return submission.

    A local rejection carries `error` and never reached the store. A store
    failure carries `store_error`.
    """

    success: bool
    message: str
    outpass: Outpass | None = None
    error: ClassificationError | None = None
    store_error: ErrorDetails | None = None
