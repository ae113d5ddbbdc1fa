"""Logging configuration for the drafter.

Import `get_logger` to create loggers in other modules and call
`configure_logging` once from the entry point (CLI or Streamlit app).
"""

import logging
import sys
from functools import lru_cache


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger to write to stderr.

    Args:
        level: Level name for the `reply_drafter` loggers, e.g. "DEBUG"
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    logging.getLogger("reply_drafter").setLevel(level.upper())

    # Streamlit is chatty at INFO
    logging.getLogger("streamlit").setLevel(logging.WARNING)


@lru_cache(maxsize=None)
def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name.

    Args:
        name: The module name, typically __name__

    Returns:
        Logger instance (cached per name)
    """
    return logging.getLogger(name)
