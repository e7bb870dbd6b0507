# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Deep pruning of nested mappings and sequences.

The walk is an explicit-stack, depth-first traversal. Each container on the
current path owns a frame holding an iterator over its children and the new
container being built for it. For every child the walker:

1. drops it when the raw value is empty (see :func:`is_empty`);
2. passes scalars and temporal values straight into the parent's output;
3. opens a new frame for nested containers, and when that frame is exhausted
   attaches its output to the parent only if something survived.

Input containers are only read, never modified. Temporal values are shared
with the output by reference.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

from ..config import get_max_depth
from ..exceptions import ConfigurationError, CyclicInputError, DepthLimitExceededError
from ..telemetry.metrics import record_sanitize_metrics
from .emptiness import is_empty
from .kinds import CONTAINER_KINDS, ValueKind, classify, own_attributes

logger = logging.getLogger(__name__)

ROOT_PATH = "$"

_sentinel = object()


@dataclass
class SanitizationResult:
    """Pruned value plus the paths that were removed to produce it."""

    value: Any
    pruned: List[str] = field(default_factory=list)

    @property
    def modified(self) -> bool:
        return bool(self.pruned)


class _Frame:
    __slots__ = ("children", "ident", "is_mapping", "key", "out", "path")

    def __init__(
        self,
        value: Any,
        kind: ValueKind,
        path: str,
        key: Any,
        attributes: Optional[Dict[str, Any]] = None,
    ):
        self.ident = id(value)
        self.path = path
        self.key = key
        self.is_mapping = kind is not ValueKind.SEQUENCE
        self.children: Iterator[Tuple[Any, Any]]
        if kind is ValueKind.MAPPING:
            self.children = iter(value.items())
            self.out: Any = {}
        elif kind is ValueKind.OBJECT:
            if attributes is None:
                attributes = own_attributes(value)
            self.children = iter(attributes.items())
            self.out = {}
        else:
            self.children = enumerate(value)
            self.out = []

    def child_path(self, key: Any) -> str:
        if not self.is_mapping:
            return f"{self.path}[{key}]"
        if isinstance(key, str) and key.isidentifier():
            return f"{self.path}.{key}"
        return f"{self.path}[{key!r}]"

    def add(self, key: Any, value: Any) -> None:
        if self.is_mapping:
            self.out[key] = value
        else:
            self.out.append(value)


class DeepSanitizer:
    """Remove empty members from arbitrarily nested data.

    ``None``, :data:`UNDEFINED`, blank strings, callables and containers that
    end up with no members are removed from their parents. Numbers (including
    zero), booleans (including ``False``) and temporal values always survive.

    Example:
        ```python
        result = DeepSanitizer().sanitize({"name": "Ada", "email": "  ", "tags": [None]})
        assert result.value == {"name": "Ada"}
        assert result.pruned == ["$.email", "$.tags[0]", "$.tags"]
        ```

    Args:
        max_depth: Maximum container nesting. Defaults to ``DEEPPRUNE_MAX_DEPTH``
            (read on every call); ``None`` or ``0`` disables the guard.

    Raises:
        ConfigurationError: If *max_depth* is negative
    """

    def __init__(self, max_depth: Any = _sentinel):
        if max_depth is not _sentinel and max_depth is not None and max_depth < 0:
            raise ConfigurationError(f"max_depth must not be negative, got {max_depth}")
        self._max_depth = max_depth

    def sanitize(self, value: Any) -> SanitizationResult:
        """Return the pruned equivalent of *value*.

        Raises:
            CyclicInputError: If a container contains one of its ancestors
            DepthLimitExceededError: If nesting exceeds the configured limit
        """
        started_at = time.perf_counter()
        try:
            result = self._walk(value)
        except CyclicInputError:
            record_sanitize_metrics("cyclic", 0, started_at)
            raise
        except DepthLimitExceededError:
            record_sanitize_metrics("depth", 0, started_at)
            raise

        record_sanitize_metrics("ok", len(result.pruned), started_at)
        return result

    def _limit(self) -> Optional[int]:
        if self._max_depth is _sentinel:
            return get_max_depth()
        return self._max_depth or None

    def _walk(self, value: Any) -> SanitizationResult:
        kind = classify(value)

        if kind is ValueKind.NULL:
            return SanitizationResult({}, [ROOT_PATH])
        if kind not in CONTAINER_KINDS:
            # Scalars, text, temporal values and callables are returned as given.
            return SanitizationResult(value)

        limit = self._limit()
        pruned: List[str] = []
        stack = [_Frame(value, kind, ROOT_PATH, None)]
        ancestors: Set[int] = {stack[0].ident}

        while True:
            frame = stack[-1]
            step = next(frame.children, None)

            if step is None:
                stack.pop()
                ancestors.discard(frame.ident)
                if not stack:
                    break
                if frame.out:
                    stack[-1].add(frame.key, frame.out)
                else:
                    pruned.append(frame.path)
                continue

            key, child = step
            child_kind = classify(child)

            attributes = None
            if child_kind is ValueKind.OBJECT:
                attributes = own_attributes(child)
                empty = not attributes
            else:
                empty = is_empty(child, child_kind)

            if empty:
                pruned.append(frame.child_path(key))
                continue

            if child_kind not in CONTAINER_KINDS:
                frame.add(key, child)
                continue

            path = frame.child_path(key)
            if id(child) in ancestors:
                logger.error("Reference cycle detected at %s", path)
                raise CyclicInputError(path)
            if limit is not None and len(stack) >= limit:
                logger.error("Nesting deeper than %d at %s", limit, path)
                raise DepthLimitExceededError(path, limit)

            stack.append(_Frame(child, child_kind, path, key, attributes))
            ancestors.add(id(child))

        logger.debug("Sanitized %s input, pruned %d node(s)", kind.value, len(pruned))
        return SanitizationResult(frame.out, pruned)


def sanitize(value: Any) -> Any:
    """Return *value* with every empty member removed, recursively.

    A top-level ``None`` becomes ``{}``. Mappings come back as ``dict`` and
    sequences as ``list``; scalars and temporal values are returned unchanged.
    """

    return DeepSanitizer().sanitize(value).value


__all__ = [
    "DeepSanitizer",
    "ROOT_PATH",
    "SanitizationResult",
    "sanitize",
]
