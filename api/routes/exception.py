"""
Centralized exception handling decorator for API route functions.

The :func:`handle_exceptions` decorator wraps an endpoint handler and converts
uncaught exceptions into :class:`fastapi.HTTPException` responses.
HTTPExceptions raised by the handler propagate untouched. Progress engine and
data source errors map to the status codes in :data:`STATUS_MAP` (most
specific class first); anything else becomes a ``500`` with the exception
message as detail.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import inspect
import logging
from functools import wraps
from typing import Any, Callable, List, Tuple, Type, TypeVar, cast

from fastapi import HTTPException

from datasources.exceptions import AuthenticationFailed, DataSourceError, MissingApiKey
from engine.exceptions import ProgressError

log = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

STATUS_MAP: List[Tuple[Type[Exception], int]] = [
    (MissingApiKey, 400),
    (AuthenticationFailed, 401),
    (ProgressError, 422),
    (DataSourceError, 502),
]


def status_for(exc: Exception) -> int:
    for exc_type, status_code in STATUS_MAP:
        if isinstance(exc, exc_type):
            return status_code
    return 500


def _translate(exc: Exception) -> HTTPException:
    status_code = status_for(exc)
    if status_code >= 500:
        log.error("request failed: %s", exc, exc_info=status_code == 500)
    return HTTPException(status_code=status_code, detail=str(exc))


def handle_exceptions(func: F) -> F:
    """Decorator that converts uncaught exceptions to HTTP errors.

    Works with both regular and async functions.
    """

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as exc:
                raise _translate(exc) from exc

        return cast(F, async_wrapper)

    @wraps(func)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as exc:
            raise _translate(exc) from exc

    return cast(F, sync_wrapper)
