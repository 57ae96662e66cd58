"""Logging configuration for wikilinks.

The library never configures logging on import. Modules log through
their own logger:

    import logging
    log = logging.getLogger(__name__)

Applications that want the package's messages on stderr call
wikilinks.configure_logging() once at startup. The level is the explicit
argument if given, else the WIKILINKS_LOG_LEVEL environment variable:
    - DEBUG: every resolution decision (candidates tried, registry hits)
    - INFO: permalink discovery summaries (default)
    - WARNING: unexpected but handled situations
"""

import logging
import os
import sys

PACKAGE_LOGGER = "wikilinks"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stderr handler to the wikilinks logger.

    Subsequent calls leave the existing handler alone.

    Args:
        level: Level name such as "DEBUG"; unknown names fall back to INFO.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if logger.handlers:
        return logger

    level_name = (level or os.environ.get("WIKILINKS_LOG_LEVEL", "INFO")).upper()
    resolved = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    # Messages go to this handler only, not again through the root logger
    logger.propagate = False
    return logger
