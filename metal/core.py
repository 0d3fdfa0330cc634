# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Core - Metal

Value predicates shared by the object utilities.

Python only has ``None``, so a separate ``UNDEFINED`` sentinel stands for a
missing value. ``None`` keeps meaning "null".
"""

from typing import Any


class _Undefined:
    """Singleton type for the ``UNDEFINED`` sentinel."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


def is_def(value: Any) -> bool:
    """Return True if the value is not ``UNDEFINED``."""
    return value is not UNDEFINED


def is_null(value: Any) -> bool:
    """Return True if the value is ``None``."""
    return value is None


def is_def_and_not_null(value: Any) -> bool:
    """Return True if the value is neither ``UNDEFINED`` nor ``None``."""
    return is_def(value) and not is_null(value)
