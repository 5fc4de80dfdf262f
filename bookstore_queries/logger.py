"""Shared logger for the bookstore query script.

Log records go to stderr so the result tables printed on stdout stay clean.
"""

import logging
import sys

from config import LOG_LEVEL

logger = logging.getLogger("bookstore_queries")

if not logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )
    logger.addHandler(_handler)

logger.setLevel(LOG_LEVEL.upper())
logger.propagate = False
