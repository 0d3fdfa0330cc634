# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Lookup - Metal

Resolves a dotted name like "a.b.c" against a root record.
"""

import logging
import sys
from typing import Any

from metal.core import UNDEFINED, is_def_and_not_null

from .records import read_key

logger = logging.getLogger(__name__)

# Root used when no scope is passed. Loaded modules play the part of the
# global namespace, so "os.path.join" resolves. Replace it to change the root.
DEFAULT_SCOPE: Any = sys.modules


def get_object_by_name(name: str, scope: Any = None, default: Any = None) -> Any:
    """
    Return the value found at a fully qualified dotted name.

    Each segment is looked up on the value reached so far: by key for
    mappings, by attribute for anything else. The walk stops at the first
    missing segment and returns ``default`` instead of raising.

    Args:
        name: Dotted path, e.g. "capabilities.chat"
        scope: Record to start from; defaults to ``DEFAULT_SCOPE``
        default: Value returned when any segment is missing

    Returns:
        The value at the end of the path, or ``default`` if not found

    Example:
        >>> get_object_by_name("media.video", {"media": {"video": False}})
        False
    """
    current = scope if is_def_and_not_null(scope) else DEFAULT_SCOPE

    for segment in name.split("."):
        current = read_key(current, segment)
        if current is UNDEFINED:
            logger.debug(f"get_object_by_name: {segment!r} not found in {name!r}")
            return default

    return current
