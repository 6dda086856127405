# edge_netcore/log.py
"""
Logging setup for processes embedding the library
The library itself only creates module loggers and never configures handlers on import
"""

import logging
from typing import Optional

from .config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging from settings

    Args:
        level: Overrides settings.LOG_LEVEL when given (e.g. "DEBUG")
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=settings.LOG_FORMAT,
    )
    logging.getLogger(__name__).debug(f"Logging configured at {level_name}")
