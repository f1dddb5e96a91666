"""Logging setup for scripts and the API process."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Configure the root logger once per process."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
