# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Mapping - Metal
"""

from typing import Any, Callable

from .records import own_keys, read_key


def map_object(obj: Any, fn: Callable[[Any, Any], Any]) -> dict[Any, Any]:
    """
    Return a new dict with the same keys as obj and values set to fn(key, value).

    Keys keep obj's own-key order. obj is left untouched.
    """
    return {key: fn(key, read_key(obj, key)) for key in own_keys(obj)}
