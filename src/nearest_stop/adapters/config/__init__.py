"""Configuration adapters."""

from nearest_stop.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
