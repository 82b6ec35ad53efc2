# /app/core/logging_config.py

import logging
from typing import Optional

# Every module logs through `logging.getLogger(__name__)`, so they all sit under this one.
logger = logging.getLogger("app")

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", format_string: Optional[str] = None) -> None:
    """Configures the application logger. Safe to call more than once."""
    logger.setLevel(level.upper())

    # Only add handler if none exist
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level.upper())
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
        logger.addHandler(handler)
