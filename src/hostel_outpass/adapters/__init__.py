"""Adapters layer - external system integrations."""

from hostel_outpass.adapters.clock import SystemClock
from hostel_outpass.adapters.config import AppConfig
from hostel_outpass.adapters.store import RestOutpassStore

__all__ = [
    "AppConfig",
    "RestOutpassStore",
    "SystemClock",
]
