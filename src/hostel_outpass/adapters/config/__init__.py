"""Configuration adapters."""

from hostel_outpass.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
