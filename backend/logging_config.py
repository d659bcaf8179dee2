"""Logging setup."""

import logging
import sys

from config import LOG_LEVEL

logger = logging.getLogger("drop")


def setup_logging(level: str = LOG_LEVEL):
    """Configure the root logger. Called once at startup."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - [%(levelname)s] - %(message)s",
        stream=sys.stdout,
    )
    # Silence noisy libraries
    logging.getLogger("multipart").setLevel(logging.WARNING)
