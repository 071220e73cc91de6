"""Logging configuration for the GLU tools API."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str = "INFO") -> None:
    """Set up the root logger once; later calls only adjust the level."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    if any(getattr(h, "_glutools", False) for h in root_logger.handlers):
        return

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    stream_handler._glutools = True  # type: ignore[attr-defined]
    root_logger.addHandler(stream_handler)
