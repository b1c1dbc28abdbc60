"""Transition payload domain models sent to the outpass store."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DEPARTURE_COMMENT = "Student departed"
DEFAULT_RETURN_COMMENT = "Student returned"


class DepartureTransition(BaseModel):
    """Payload for marking a departure."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    comments: str = DEFAULT_DEPARTURE_COMMENT

    def to_payload(self) -> dict[str, str]:
        """Serialize to the JSON body expected by the store."""
        return self.model_dump(by_alias=True)


class ReturnTransition(BaseModel):
    """Payload for marking a return.

    `late_return_reason` is only serialized when present.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    comments: str = DEFAULT_RETURN_COMMENT
    late_return_reason: str | None = Field(default=None, alias="lateReturnReason")

    def to_payload(self) -> dict[str, str]:
        """Serialize to the JSON body expected by the store."""
        return self.model_dump(by_alias=True, exclude_none=True)
