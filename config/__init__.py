"""Application configuration utilities."""

from .log_setup import configure_logging
from .settings import DEFAULT_CURRENCY_SYMBOL, Settings, get_settings

__all__ = [
    "DEFAULT_CURRENCY_SYMBOL",
    "Settings",
    "configure_logging",
    "get_settings",
]
