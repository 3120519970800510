"""Logging configuration for applications that embed rankeval.

The library itself only creates module loggers; calling setup_logging is left
to the application (or a notebook) that wants the records on stdout.
"""

import logging
import sys

from rankeval.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger to write to stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR). Defaults to the
            LOG_LEVEL setting.
    """
    level = (level or get_settings().log_level).upper()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(level)
    stdout_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[stdout_handler],
        force=True,  # Force reconfiguration if already configured
    )
