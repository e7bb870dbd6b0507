# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

# deepprune/decorator.py

import functools
import inspect
import logging
from typing import Any, Callable, Optional, Union

from opentelemetry.trace import Status, StatusCode

from .exceptions import DeepPruneError
from .sanitization import DeepSanitizer
from .telemetry import get_tracer

logger = logging.getLogger(__name__)

# Sentinel object to detect if a parameter was provided by the user
_sentinel = object()


def prune_result(
    name: Optional[Union[str, Callable]] = None,
    *,
    max_depth: Any = _sentinel,
):
    """
    Sanitize the return value of the decorated function.

    Works on both sync and async functions. The wrapped function's result is
    passed through :class:`DeepSanitizer` before it reaches the caller, so
    nothing downstream (serializers, log formatters, storage) sees ``None``
    fields, blank strings or empty containers.

    :param name: Optional. Label used for the tracing span. If not provided,
                 one is generated from the function's module and name.
    :param max_depth: Optional. Nesting limit handed to the sanitizer. If not
                      provided, ``DEEPPRUNE_MAX_DEPTH`` applies.

    .. code-block:: python

        from deepprune import prune_result

        @prune_result
        def load_profile(user_id): ...

        @prune_result("api.orders", max_depth=64)
        async def list_orders(): ...
    """

    def decorator(func: Callable):
        label = name if isinstance(name, str) else f"{func.__module__}.{func.__qualname__}"
        sanitizer = DeepSanitizer() if max_depth is _sentinel else DeepSanitizer(max_depth=max_depth)

        def _prune(value: Any) -> Any:
            with get_tracer("deepprune.decorator").start_as_current_span(
                f"deepprune.prune:{label}",
                attributes={"deepprune.target": label},
            ) as span:
                try:
                    result = sanitizer.sanitize(value)
                except DeepPruneError as exc:
                    span.set_status(Status(StatusCode.ERROR, exc.message))
                    raise
                span.set_attribute("deepprune.pruned", len(result.pruned))
                if result.modified:
                    logger.debug("Pruned %d node(s) from the result of %s", len(result.pruned), label)
                return result.value

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                """Wrapper for asynchronous functions."""
                return _prune(await func(*args, **kwargs))

            return async_wrapper

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            """Wrapper for synchronous functions."""
            return _prune(func(*args, **kwargs))

        return sync_wrapper

    # Dual-syntax support (@prune_result vs @prune_result("label"))
    if callable(name):
        return decorator(name)
    return decorator


__all__ = ["prune_result"]
