# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Emptiness predicate used as the pre-check for every child node."""

from __future__ import annotations

from typing import Any, Optional

from .kinds import ValueKind, classify, own_attributes


def is_function(value: Any) -> bool:
    """Return True for functions, methods, classes and other callables."""

    return classify(value) is ValueKind.CALLABLE


def is_empty(value: Any, kind: Optional[ValueKind] = None) -> bool:
    """Return True if *value* should be pruned without looking any deeper.

    Containers are judged by their raw size only: ``[None]`` is not empty
    here even though it sanitizes down to ``[]``. Zero and ``False`` are
    never empty. Pass *kind* when the caller has already classified *value*.
    """

    if kind is None:
        kind = classify(value)

    if kind is ValueKind.NULL or kind is ValueKind.CALLABLE:
        return True
    if kind is ValueKind.TEXT:
        return not value.strip()
    if kind is ValueKind.MAPPING or kind is ValueKind.SEQUENCE:
        return len(value) == 0
    if kind is ValueKind.OBJECT:
        return not own_attributes(value)
    return False


__all__ = ["is_empty", "is_function"]
