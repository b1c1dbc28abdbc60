"""Protocol for updating gate state."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime

    from hostel_outpass.domain.models.board_entry import DepartureBoardEntry, ReturnBoardEntry
    from hostel_outpass.domain.models.today_activity import TodayActivity


class StateUpdaterProtocol(Protocol):
    """Protocol for updating gate state."""

    def update_departure_board(self, entries: list["DepartureBoardEntry"]) -> None:
        """Replace the departure board.

        Args:
            entries: Approved passes with their departure classification.
        """
        ...

    def update_return_board(self, entries: list["ReturnBoardEntry"]) -> None:
        """Replace the return board.

        Args:
            entries: Active passes with their return classification.
        """
        ...

    def update_today_activity(self, activity: "TodayActivity") -> None:
        """Replace today's activity snapshot.

        Args:
            activity: Today's activity from the store.
        """
        ...

    def update_api_status(self, status: str) -> None:
        """Update the API status in the state.

        Args:
            status: The API status ("success" or "error").
        """
        ...

    def update_last_update_time(self, time: "datetime") -> None:
        """Update the last update timestamp in the state.

        Args:
            time: The timestamp of the last update.
        """
        ...
