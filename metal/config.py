# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Configuration - Metal

Reads settings from the environment (and a local .env file if present).

**Simple Explanation:**
The utilities themselves need no configuration, and nothing inside the
package imports this module. Applications (and the test suite) import it
themselves and call setup_logging() to get the project log format.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level() -> int:
    """
    Resolve the logging level from METAL_LOG_LEVEL.

    Returns:
        A ``logging`` level constant. Unknown names fall back to WARNING.
    """
    name = os.getenv("METAL_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning(
            f"Unknown METAL_LOG_LEVEL {name!r} - using {DEFAULT_LOG_LEVEL}"
        )
        return logging.WARNING
    return level


def setup_logging() -> None:
    """Configure root logging with the project format and configured level."""
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
