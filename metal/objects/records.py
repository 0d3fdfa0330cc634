# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Records - Metal

Helpers for treating dicts, pydantic models and plain objects alike as
string-keyed records.

**Simple Explanation:**
A "record" is anything we can list keys for and read or write values on.
- Mappings (usually dicts): keys are the mapping keys
- Pydantic models: keys are the declared fields, then any extra fields
- Other objects: keys are the instance attributes in ``vars(obj)``, then
  any filled-in ``__slots__`` entries (slotted dataclasses included)

Attributes defined on the class (methods, class variables) are inherited,
so they never count as own keys. They can still be read, the same way
normal attribute access finds them.
"""

from collections.abc import Mapping, MutableMapping
from typing import Any

from pydantic import BaseModel

from metal.core import UNDEFINED
from metal.errors import InvalidArgumentError


def own_keys(record: Any) -> list[Any]:
    """
    List the keys stored directly on a record, in enumeration order.

    Values that are not records (numbers, strings, None) have no own keys.
    """
    if isinstance(record, Mapping):
        return list(record.keys())

    if isinstance(record, BaseModel):
        keys = list(type(record).model_fields)
        extra = record.__pydantic_extra__
        if extra:
            keys.extend(key for key in extra if key not in keys)
        return keys

    try:
        keys = list(vars(record))
    except TypeError:
        keys = []

    for key in _slot_names(type(record)):
        if key not in keys and hasattr(record, key):
            keys.append(key)
    return keys


def _slot_names(cls: type) -> list[str]:
    """Collect __slots__ entries declared along the class hierarchy, base classes first."""
    names = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__") and name not in names:
                names.append(name)
    return names


def read_key(record: Any, key: Any, default: Any = UNDEFINED) -> Any:
    """
    Read a key from a record, returning ``default`` when it is missing.

    Mappings are read by item, everything else by attribute. Reading from
    ``None`` or ``UNDEFINED`` always misses.
    """
    if isinstance(record, Mapping):
        # Membership first so mappings with default factories never grow a key
        if key in record:
            return record[key]
        return default

    if record is None or record is UNDEFINED or not isinstance(key, str):
        return default
    return getattr(record, key, default)


def write_key(record: Any, key: Any, value: Any) -> None:
    """
    Write a key onto a record in place.

    Raises:
        InvalidArgumentError: If the record cannot accept the key
    """
    if isinstance(record, MutableMapping):
        record[key] = value
        return

    if isinstance(record, Mapping):
        raise InvalidArgumentError(
            f"Cannot assign key {key!r} on read-only mapping {type(record).__name__}"
        )

    if not isinstance(key, str):
        raise InvalidArgumentError(
            f"Cannot assign non-string key {key!r} on {type(record).__name__}"
        )

    try:
        setattr(record, key, value)
    except (AttributeError, TypeError, ValueError) as exc:
        raise InvalidArgumentError(
            f"Cannot assign key {key!r} on {type(record).__name__}: {exc}"
        ) from exc
