"""
Retry decorator for connector methods.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from functools import wraps
from typing import Any, Callable, Iterator, Tuple, Type, TypeVar, cast

from datasources.exceptions import DataSourceUnavailable, QueryTimeout

log = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

TRANSIENT_ERRORS: Tuple[Type[Exception], ...] = (DataSourceUnavailable, QueryTimeout)


def _delays(attempts: int, delay: float, backoff: float) -> Iterator[float]:
    current = delay
    for _ in range(max(0, attempts - 1)):
        yield current
        current *= backoff


def retry(
    *,
    attempts: int = 3,
    delay: float = 1.0,
    backoff: float = 2.0,
    exceptions: Tuple[Type[Exception], ...] = TRANSIENT_ERRORS,
) -> Callable[[F], F]:
    """Re-invoke the wrapped callable on ``exceptions``, sleeping with exponential backoff.

    The last failure propagates once ``attempts`` calls have been made.
    """

    def decorator(func: F) -> F:
        name = getattr(func, "__qualname__", repr(func))

        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                for attempt, pause in enumerate(_delays(attempts, delay, backoff), start=1):
                    try:
                        return await func(*args, **kwargs)
                    except exceptions as exc:
                        log.warning("%s failed (attempt %d/%d): %s", name, attempt, attempts, exc)
                        await asyncio.sleep(pause)
                return await func(*args, **kwargs)

            return cast(F, async_wrapper)

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            for attempt, pause in enumerate(_delays(attempts, delay, backoff), start=1):
                try:
                    return func(*args, **kwargs)
                except exceptions as exc:
                    log.warning("%s failed (attempt %d/%d): %s", name, attempt, attempts, exc)
                    time.sleep(pause)
            return func(*args, **kwargs)

        return cast(F, sync_wrapper)

    return decorator
