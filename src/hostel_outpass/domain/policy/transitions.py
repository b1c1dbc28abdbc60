"""Build transition payloads once the classification allows them."""

from datetime import datetime

from hostel_outpass.domain.models.classification import (
    ClassificationError,
    ClassificationErrorKind,
)
from hostel_outpass.domain.models.outpass import Outpass
from hostel_outpass.domain.models.transition import (
    DEFAULT_DEPARTURE_COMMENT,
    DEFAULT_RETURN_COMMENT,
    DepartureTransition,
    ReturnTransition,
)
from hostel_outpass.domain.policy.outpass_classifier import (
    classify_for_departure,
    classify_for_return,
)


def _clean(text: str | None) -> str | None:
    if text is None:
        return None
    stripped = text.strip()
    return stripped or None


def build_departure_transition(
    now: datetime, outpass: Outpass, comments: str | None = None
) -> DepartureTransition | ClassificationError:
    """Build a departure payload, or the reason it may not be submitted."""
    classification = classify_for_departure(now, outpass)
    if isinstance(classification, ClassificationError):
        return classification
    if not classification.action_enabled:
        return ClassificationError(
            ClassificationErrorKind.INVALID_STATE,
            f"Departure for outpass {outpass.id} cannot be marked now: "
            f"{classification.label} ({classification.detail})",
        )
    return DepartureTransition(comments=_clean(comments) or DEFAULT_DEPARTURE_COMMENT)


def build_return_transition(
    now: datetime,
    outpass: Outpass,
    comments: str | None = None,
    late_return_reason: str | None = None,
) -> ReturnTransition | ClassificationError:
    """Build a return payload, rejecting late returns that lack a reason."""
    classification = classify_for_return(now, outpass)
    if isinstance(classification, ClassificationError):
        return classification

    reason = _clean(late_return_reason)
    if classification.reason_required and reason is None:
        return ClassificationError(
            ClassificationErrorKind.MISSING_REASON,
            f"Outpass {outpass.id} is an {classification.category.value}; "
            "a late return reason is required",
        )
    return ReturnTransition(
        comments=_clean(comments) or DEFAULT_RETURN_COMMENT,
        late_return_reason=reason,
    )
