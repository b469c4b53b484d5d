"""Logging setup shared by the console and desktop front-ends.

The engine modules only create loggers with ``logging.getLogger(__name__)``;
handlers and levels are configured once here by the entry point.
"""

import logging
import os
import sys


BASE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level="WARNING", stream=None):
    """Configure the root logger.

    Args:
        level: Logging level name, overridden by the LOG_LEVEL environment variable.
        stream: Output stream for the console handler (defaults to stderr so the
            console front-end's stdout stays clean).
    """
    level = os.getenv("LOG_LEVEL", level)
    numeric_level = getattr(logging, str(level).upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(numeric_level)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(BASE_FORMAT, DATE_FORMAT))
    root_logger.addHandler(console_handler)

    # Qt and the input backends are noisy at DEBUG
    logging.getLogger("PySide6").setLevel(logging.WARNING)
    logging.getLogger("pynput").setLevel(logging.WARNING)

    logging.getLogger("Calculator").setLevel(numeric_level)
