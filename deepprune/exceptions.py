# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Custom exceptions for deepprune."""

from __future__ import annotations

from typing import Optional


class DeepPruneError(Exception):
    """Base exception for all deepprune errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(DeepPruneError):
    """Raised when a configuration value (usually an env var) is malformed."""


class CyclicInputError(DeepPruneError):
    """Raised when the input tree contains a reference cycle."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        super().__init__(message or f"Cyclic input: container at '{path}' references one of its ancestors.")


class DepthLimitExceededError(DeepPruneError):
    """Raised when the input nests deeper than the configured limit."""

    def __init__(self, path: str, limit: int):
        self.path = path
        self.limit = limit
        super().__init__(
            f"Input nesting exceeds the maximum depth of {limit} at '{path}'. "
            f"Raise DEEPPRUNE_MAX_DEPTH or pass max_depth= to allow deeper trees."
        )


__all__ = [
    "DeepPruneError",
    "ConfigurationError",
    "CyclicInputError",
    "DepthLimitExceededError",
]
