"""Process-wide logging setup."""

import logging
import sys
from typing import Optional

from config.defaults import LOG_LEVEL

_LOGGER_INITIALIZED = False


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once.

    Streamlit re-runs the script on every interaction, so repeated calls must
    not stack handlers.
    """
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
    )
    _LOGGER_INITIALIZED = True


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger for the requested module."""
    configure_logging()
    return logging.getLogger(name)
