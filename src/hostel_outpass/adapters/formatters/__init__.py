"""Output formatters."""

from hostel_outpass.adapters.formatters.board_formatter import BoardFormatter

__all__ = ["BoardFormatter"]
