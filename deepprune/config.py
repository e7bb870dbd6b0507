# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment-driven settings.

Values are read on every call so tests and long-running processes can change
them through the environment without re-importing the package.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

MAX_DEPTH_ENV = "DEEPPRUNE_MAX_DEPTH"
DEFAULT_MAX_DEPTH = 10_000

_DISABLED = ("0", "none", "off", "false", "no")


def get_max_depth() -> Optional[int]:
    """Return the configured nesting limit, or ``None`` when the guard is off."""

    raw = os.getenv(MAX_DEPTH_ENV, "").strip()
    if not raw:
        return DEFAULT_MAX_DEPTH

    if raw.lower() in _DISABLED:
        logger.debug("%s=%s disables the depth guard", MAX_DEPTH_ENV, raw)
        return None

    try:
        limit = int(raw)
    except ValueError:
        raise ConfigurationError(f"{MAX_DEPTH_ENV} must be a positive integer or 'none', got {raw!r}") from None

    if limit < 0:
        raise ConfigurationError(f"{MAX_DEPTH_ENV} must not be negative, got {limit}")
    return limit


__all__ = ["DEFAULT_MAX_DEPTH", "MAX_DEPTH_ENV", "get_max_depth"]
