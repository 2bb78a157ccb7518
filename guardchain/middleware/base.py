# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Building blocks shared by the guards.

A handler is any callable taking ``(request, response)``. A middleware takes
the next handler and returns a new handler. When the next handler is a
coroutine function the returned handler is one too, so a chain that contains
an asynchronous stage is awaited as a whole, short-circuits included.

A plain synchronous middleware written by the caller hides an async stage
behind it: handlers outside it return an awaitable only when they delegate.
Pass such results through ``resolve``.
"""

import inspect
from functools import wraps
from typing import Any, Awaitable, Callable, Optional

from ..models.responses import ShortCircuit

Handler = Callable[[Any, Any], Any]
Middleware = Callable[[Handler], Handler]
Check = Callable[[Any], Optional[ShortCircuit]]


def is_async_handler(handler: Handler) -> bool:
    """Check whether calling the handler produces a coroutine."""
    if inspect.iscoroutinefunction(handler):
        return True
    call = getattr(handler, '__call__', None)
    return inspect.iscoroutinefunction(call)


async def resolve(result: Any) -> Any:
    """Await the result if it is awaitable, otherwise return it as-is."""
    if inspect.isawaitable(result):
        return await result
    return result


def guard(check: Check) -> Middleware:
    """
    Build a middleware from a synchronous check.

    Args:
        check: Called with the request; returns a ShortCircuit to stop the
            request, or None to delegate to the next handler

    Returns:
        Middleware function
    """
    def middleware(next_handler: Handler) -> Handler:
        if is_async_handler(next_handler):
            @wraps(next_handler)
            async def async_handler(request, response):
                rejection = check(request)
                if rejection is not None:
                    return rejection.write(response)
                return await resolve(next_handler(request, response))

            return async_handler

        @wraps(next_handler)
        def handler(request, response):
            rejection = check(request)
            if rejection is not None:
                return rejection.write(response)
            return next_handler(request, response)

        return handler

    return middleware


def async_guard(check: Callable[[Any], Awaitable[Optional[ShortCircuit]]]) -> Middleware:
    """Build a middleware from an asynchronous check. The handler is always a coroutine function."""
    def middleware(next_handler: Handler) -> Handler:
        @wraps(next_handler)
        async def handler(request, response):
            rejection = await check(request)
            if rejection is not None:
                return rejection.write(response)
            return await resolve(next_handler(request, response))

        return handler

    return middleware
