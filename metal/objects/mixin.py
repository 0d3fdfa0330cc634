# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Mixin - Metal

Copies the own keys of source records onto a target record, in place.
"""

import logging
from typing import Any

from metal.core import is_def_and_not_null
from metal.errors import InvalidArgumentError

from .records import own_keys, read_key, write_key

logger = logging.getLogger(__name__)


def mixin(target: Any, *sources: Any) -> Any:
    """
    Copy all own keys of each source onto the target.

    Sources are applied left to right, so later sources win when keys
    collide. ``None`` and ``UNDEFINED`` sources are skipped. Nothing is
    copied: the target itself is mutated and returned.

    Args:
        target: Record to copy into (dict, pydantic model or plain object)
        *sources: Records to copy from

    Returns:
        The same target reference

    Raises:
        InvalidArgumentError: If target is None/UNDEFINED or cannot accept a key

    Example:
        >>> settings = {"chat": True}
        >>> mixin(settings, {"chat": False}, None, {"recording": True})
        {'chat': False, 'recording': True}
    """
    if not is_def_and_not_null(target):
        raise InvalidArgumentError("Cannot convert undefined or null to object")

    for position, source in enumerate(sources, start=1):
        if not is_def_and_not_null(source):
            logger.debug(f"mixin: skipping empty source at position {position}")
            continue

        for key in own_keys(source):
            write_key(target, key, read_key(source, key))

    return target
