"""Logging configuration for the session feedback service.

Usage:
    from feedback_service.logging_config import configure_logging
    configure_logging()
"""

import logging
import sys
from typing import Optional

from feedback_service.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Install a single stdout handler on the root logger.

    Safe to call more than once; existing handlers are replaced.
    """
    level_name = (level or settings.log_level).upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level_name, logging.INFO))

    # uvicorn's access log duplicates the request-logging middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
