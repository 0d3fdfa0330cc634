# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Object Utilities - Metal

Independent helpers for working with records (dicts, pydantic models and
plain objects).
"""

from .equality import shallow_equal
from .lookup import get_object_by_name
from .mapping import map_object
from .mixin import mixin

__all__ = ["get_object_by_name", "map_object", "mixin", "shallow_equal"]
