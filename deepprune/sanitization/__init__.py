"""Sanitization package - deep pruning of empty values.

This package classifies every node of a nested value and rebuilds the tree
without its empty members (null markers, blank strings, callables and
containers left with nothing in them).
"""

from .emptiness import is_empty, is_function
from .kinds import UNDEFINED, ValueKind, classify
from .walker import DeepSanitizer, SanitizationResult, sanitize

__all__ = [
    "DeepSanitizer",
    "SanitizationResult",
    "UNDEFINED",
    "ValueKind",
    "classify",
    "is_empty",
    "is_function",
    "sanitize",
]
