# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Middleware composition.
"""

from typing import Sequence

from .base import Handler, Middleware


def combine_middleware(*middleware: Middleware) -> Middleware:
    """
    Combine middleware into one.

    ``combine_middleware(g1, g2, g3)(handler)`` is ``g1(g2(g3(handler)))``:
    the first middleware runs first and the last one sits closest to the
    handler. With no middleware the handler is returned unchanged.

    Args:
        *middleware: Middleware functions in execution order

    Returns:
        Middleware applying all of them

    Raises:
        TypeError: If any entry is not callable
    """
    for index, entry in enumerate(middleware):
        if not callable(entry):
            raise TypeError(f"Middleware at position {index} is not callable: {entry!r}")

    chain: Sequence[Middleware] = tuple(middleware)

    def combined(handler: Handler) -> Handler:
        wrapped = handler
        for entry in reversed(chain):
            wrapped = entry(wrapped)
        return wrapped

    return combined
