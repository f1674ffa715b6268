"""Logging setup: a single stderr handler under the ``ttt_nxn`` logger."""

import logging
import sys

LOGGER_NAME = "ttt_nxn"


class PlainFormatter(logging.Formatter):
    """time | level | logger | message"""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the package logger; calling it again replaces the handler."""
    log_level = getattr(logging, str(level).upper(), logging.WARNING)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(PlainFormatter())
    logger.addHandler(handler)
    return logger
