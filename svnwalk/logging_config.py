"""Logging setup for scripts built on svnwalk.

Library modules only create loggers; handlers are configured here, by the
application, never on import.
"""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging.

    Args:
        level: Level name; defaults to $SVNWALK_LOG_LEVEL, then INFO
    """
    level_name = (level or os.getenv("SVNWALK_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
