# src/common/logging_utils.py

import logging

from config import LOG_LEVEL, LOG_FORMAT, LOG_DATE_FORMAT

# Environment switch (read in config.py):
#   LOG_LEVEL=DEBUG / INFO / WARNING / ERROR


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start (client/client.py)."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def format_hand(cards) -> str:
    """Short one-line hand summary for log messages: '[A♥, 10♦]'."""
    return "[" + ", ".join(repr(c) for c in cards) + "]"
