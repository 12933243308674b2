"""
Logging bootstrap for applications embedding pilltext.
"""

import logging
from typing import Optional, Union

from pilltext import config


def setup_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure root logging with the project format.
    
    Args:
        level: Logging level name or number; defaults to config.LOG_LEVEL
    """
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=config.LOG_FORMAT
    )
