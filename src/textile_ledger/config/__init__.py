"""Configuration module."""

from textile_ledger.config.logging import configure_logging, get_logger
from textile_ledger.config.settings import (
    APISettings,
    EngineSettings,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "Settings",
    "APISettings",
    "EngineSettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "get_logger",
]
