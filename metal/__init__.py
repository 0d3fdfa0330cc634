# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Metal

Generic object utilities: merging, dotted-name lookup, value mapping and
shallow comparison of records.
"""

from .core import UNDEFINED, is_def, is_def_and_not_null, is_null
from .errors import InvalidArgumentError
from .objects import get_object_by_name, map_object, mixin, shallow_equal

__all__ = [
    "UNDEFINED",
    "InvalidArgumentError",
    "get_object_by_name",
    "is_def",
    "is_def_and_not_null",
    "is_null",
    "map_object",
    "mixin",
    "shallow_equal",
]
