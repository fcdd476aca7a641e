"""
Logging setup shared by the API and services.
"""

import logging
import sys
from typing import Optional

from app.config import Config

_configured = False


def setup_logging(config: Optional[Config] = None) -> None:
    """
    Configure the root logger once from LOG_LEVEL / LOG_FORMAT.

    Args:
        config: Application config; defaults are used when omitted
    """
    global _configured
    if _configured:
        return

    level_name = config.LOG_LEVEL if config else "INFO"
    fmt = config.LOG_FORMAT if config else "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name.upper(), logging.INFO))
    root.addHandler(handler)

    # httpx logs every request at INFO, which would include the API URL on each call
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
