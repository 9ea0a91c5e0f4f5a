"""Logging setup shared by the Streamlit entrypoint and scripts."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAMES = ("app", "analytics", "core", "config")


def configure_logging(level: str | int = logging.INFO) -> None:
    """Attach one console handler to each package logger.

    Safe to call on every Streamlit rerun; loggers that already carry a
    handler are only re-levelled.
    """

    formatter = logging.Formatter(LOG_FORMAT)
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if logger.handlers:
            continue
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
