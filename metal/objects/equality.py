# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Equality - Metal

Shallow comparison of two records.
"""

from numbers import Number
from typing import Any

from .records import own_keys, read_key


def _strict_equal(value1: Any, value2: Any) -> bool:
    """
    Compare scalars by value and everything else by identity.

    Booleans only equal themselves, so True does not equal 1.
    """
    if value1 is value2:
        return True

    if isinstance(value1, bool) or isinstance(value2, bool):
        return False

    if isinstance(value1, Number) and isinstance(value2, Number):
        return value1 == value2

    for scalar_type in (str, bytes):
        if isinstance(value1, scalar_type) and isinstance(value2, scalar_type):
            return value1 == value2

    return False


def shallow_equal(obj1: Any, obj2: Any) -> bool:
    """
    Check whether two records hold the same values at the top level.

    Only the keys stored directly on the records are compared, and nested
    values are compared by identity (two separate but identical dicts differ).

    The key counts must match, then every key of obj1 is looked up on obj2
    in obj1's order. There is no separate check that obj2 has the same key
    names: a key missing from obj2 just reads as a different value.

    Args:
        obj1: First record
        obj2: Second record

    Returns:
        True if the records are shallowly equal
    """
    if _strict_equal(obj1, obj2):
        return True

    keys1 = own_keys(obj1)
    keys2 = own_keys(obj2)
    if len(keys1) != len(keys2):
        return False

    for key in keys1:
        if not _strict_equal(read_key(obj1, key), read_key(obj2, key)):
            return False
    return True
