# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""deepprune - remove empty values from nested data before it leaves the process."""

from .decorator import prune_result
from .exceptions import (
    ConfigurationError,
    CyclicInputError,
    DeepPruneError,
    DepthLimitExceededError,
)
from .sanitization import (
    UNDEFINED,
    DeepSanitizer,
    SanitizationResult,
    ValueKind,
    classify,
    is_empty,
    is_function,
    sanitize,
)

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "CyclicInputError",
    "DeepPruneError",
    "DeepSanitizer",
    "DepthLimitExceededError",
    "SanitizationResult",
    "UNDEFINED",
    "ValueKind",
    "classify",
    "is_empty",
    "is_function",
    "prune_result",
    "sanitize",
]
