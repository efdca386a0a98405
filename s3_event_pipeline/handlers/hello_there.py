"""Lambda handler that only logs; it makes no AWS calls."""

import logging
import os
from typing import Any

log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, log_level, logging.INFO))
logger = logging.getLogger(__name__)
logger.setLevel(getattr(logging, log_level, logging.INFO))


def lambda_handler(_event: dict[str, Any], _context: Any) -> None:
    logger.info("hello there")
    logger.info("GeNeRaL kEnObI")
