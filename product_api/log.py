"""
Logging helpers shared by the server and its request middleware.

Usage:
    from product_api.log import get_logger

    logger = get_logger(__name__)
    logger.info("GET /api/products")
"""

import logging
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

_configured = False


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def setup_logging(level: str = "INFO") -> None:
    """Configure application-wide logging to stdout.

    Safe to call more than once; only the first call installs a handler.
    """
    global _configured
    root = logging.getLogger("product_api")
    root.setLevel(level.upper())
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True
