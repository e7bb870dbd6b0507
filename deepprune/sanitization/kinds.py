# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Value classification.

Every node of an input tree is mapped onto exactly one :class:`ValueKind`
before the walker decides what to do with it. The order of the checks in
:func:`classify` matters: ``bool`` is a ``numbers.Number``, a ``str`` is a
``Sequence`` and a class is ``callable``, so the more specific kinds are
tested first.
"""

from __future__ import annotations

import dataclasses
import enum
import numbers
import uuid
from collections.abc import Mapping, Sequence, Set
from datetime import date, time, timedelta
from pathlib import PurePath
from typing import Any, Dict, Final


class _Undefined:
    """Marker for an explicitly absent value, distinct from ``None``."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED: Final = _Undefined()


class ValueKind(enum.Enum):
    NULL = "null"
    TEXT = "text"
    BOOLEAN = "boolean"
    NUMBER = "number"
    TEMPORAL = "temporal"
    SCALAR = "scalar"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    CALLABLE = "callable"
    OBJECT = "object"


TEXT_TYPES: Final = (str, bytes, bytearray)
TEMPORAL_TYPES: Final = (date, time, timedelta)  # datetime subclasses date
SCALAR_TYPES: Final = (enum.Enum, uuid.UUID, PurePath)

# Kinds the walker descends into; OBJECT is sanitized as a mapping of its attributes.
CONTAINER_KINDS: Final = frozenset({ValueKind.MAPPING, ValueKind.SEQUENCE, ValueKind.OBJECT})


def classify(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` of *value*."""

    if value is None or value is UNDEFINED:
        return ValueKind.NULL
    if isinstance(value, TEXT_TYPES):
        return ValueKind.TEXT
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, numbers.Number):
        return ValueKind.NUMBER
    if isinstance(value, TEMPORAL_TYPES):
        return ValueKind.TEMPORAL
    if isinstance(value, SCALAR_TYPES):
        return ValueKind.SCALAR
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (Sequence, Set)):
        return ValueKind.SEQUENCE
    if callable(value):
        return ValueKind.CALLABLE
    return ValueKind.OBJECT


def own_attributes(value: Any) -> Dict[str, Any]:
    """Return the attributes of an opaque object as an ordered ``dict``.

    Dataclass instances contribute their declared fields (slotted ones
    included); other objects contribute their instance ``__dict__``, or the
    ``__slots__`` they have set when there is no ``__dict__``. Objects with
    none of these have no keys.
    """

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    try:
        return dict(vars(value))
    except TypeError:
        return _slot_attributes(value)


def _slot_attributes(value: Any) -> Dict[str, Any]:
    attributes: Dict[str, Any] = {}
    for klass in reversed(type(value).__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__") or name in attributes:
                continue
            try:
                attributes[name] = getattr(value, name)
            except AttributeError:
                continue  # unset slot
    return attributes


__all__ = [
    "CONTAINER_KINDS",
    "UNDEFINED",
    "ValueKind",
    "classify",
    "own_attributes",
]
