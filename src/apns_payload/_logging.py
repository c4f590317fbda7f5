"""Logging configuration for apns-payload."""

import logging
import os
from typing import Optional


def configure_logging(level_name: Optional[str] = None) -> None:
    """Configure the apns_payload logger.

    Environment Variables:
        APNS_PAYLOAD_LOG_LEVEL: DEBUG, INFO, WARNING (default), or ERROR

    An explicit level_name wins over the environment. Safe to call multiple
    times; a handler is only added once.
    """
    logger = logging.getLogger("apns_payload")

    level_name = (level_name or os.environ.get("APNS_PAYLOAD_LOG_LEVEL", "WARNING")).upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    if logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s] %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(handler)
