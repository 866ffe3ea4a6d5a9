from __future__ import annotations
import logging

from carlae.config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int | None = None) -> None:
    """Install a stderr handler on the root logger for the interactive driver."""
    logging.basicConfig(
        level=get_log_level() if level is None else level,
        format=LOG_FORMAT,
    )
