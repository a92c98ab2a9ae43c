"""Logging setup shared by the command line entry points"""

import logging
import sys
from typing import Union


def configure_logging(log_level: Union[int, str]) -> logging.Logger:
    """Route root logging to stderr; stdout is reserved for rendered pages."""
    level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    return root_logger
