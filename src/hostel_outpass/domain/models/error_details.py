"""Store error details domain model."""

from pydantic import BaseModel, ConfigDict

CONFLICT_STATUS = 409


class ErrorDetails(BaseModel):
    """Why a store call failed, with the HTTP status code when there was one."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str
    message: str | None = None  # Server-provided message, shown to the officer

    @property
    def is_conflict(self) -> bool:
        """Whether another officer already transitioned the pass."""
        return self.status_code == CONFLICT_STATUS


class OutpassStoreError(Exception):
    """Raised by store adapters when a store call fails."""

    def __init__(self, details: ErrorDetails) -> None:
        """Initialize with the error details.

        Args:
            details: Status code and reason of the failure.
        """
        super().__init__(details.message or details.reason)
        self.details = details
