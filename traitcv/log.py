"""
Logging for traitcv.

Modules log through logging.getLogger(__name__) and never attach handlers.
Scripts that want the estimator's DEBUG/INFO records on screen call
setup_logging() once.
"""

import logging
import sys
from typing import Optional

from traitcv.config import settings


def setup_logging(level: Optional[str] = None, format_string: Optional[str] = None) -> None:
    """Send log records to stdout at TRAITCV_LOG_LEVEL, or at `level` when given.

    Replaces any handlers already on the root logger, so calling it twice
    does not duplicate output.
    """
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format=format_string or settings.log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
