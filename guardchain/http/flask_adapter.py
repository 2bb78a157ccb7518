# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Flask host adapter.

Runs a guarded handler as a Flask view. ``flask.request`` is passed to the
handler as the request; a ``FlaskResponse`` collects what guards and the
handler write and is rendered into a Flask response afterwards.
"""

import inspect
from functools import wraps
from typing import Any
from flask import current_app, g, make_response, request

from ..middleware.base import Handler, Middleware, is_async_handler, resolve
from ..middleware.compose import combine_middleware
from .exchange import SimpleResponse


class FlaskResponse(SimpleResponse):
    """Response capability that renders into a Flask response."""

    def render(self, result: Any = None):
        """
        Produce the view's return value.

        If nothing was sent and the handler returned something, that value is
        handed back to Flask unchanged so plain Flask return values still work.

        Args:
            result: Return value of the guarded handler

        Returns:
            Flask response or the handler's own return value
        """
        if not self.sent and result is not None and result is not self:
            return result

        body = self.body if self.body is not None else ''
        return make_response(body, self.status_code, list(self.headers.items()))


def _mark_guards_passed(handler: Handler) -> Handler:
    """Wrap a terminal handler so the request records that every guard let it through."""
    if is_async_handler(handler):
        @wraps(handler)
        async def async_terminal(request, response):
            g.guards_passed = True
            return await resolve(handler(request, response))

        return async_terminal

    @wraps(handler)
    def terminal(request, response):
        g.guards_passed = True
        return handler(request, response)

    return terminal


def as_flask_view(handler: Handler):
    """
    Turn a ``(request, response)`` handler into a Flask view function.

    URL parameters are not passed on; they are available on
    ``request.view_args``. Coroutine handlers become async views. A sync
    handler that still returns an awaitable (a plain middleware in front of
    an async stage) is run to completion with ``current_app.ensure_sync``.
    """
    if is_async_handler(handler):
        @wraps(handler)
        async def async_view(*args, **kwargs):
            response = FlaskResponse()
            result = await handler(request, response)
            return response.render(result)

        return async_view

    @wraps(handler)
    def view(*args, **kwargs):
        response = FlaskResponse()
        result = handler(request, response)
        if inspect.isawaitable(result):
            result = current_app.ensure_sync(resolve)(result)
        return response.render(result)

    return view


def guarded(*middleware: Middleware):
    """
    Decorator applying guards to a Flask route.

    Sets ``g.guarded`` for the request, and ``g.guards_passed`` once the
    decorated function is reached.

    Example:
        @app.route('/items', methods=['GET', 'POST', 'OPTIONS'])
        @guarded(with_cors(cors_config), with_http_methods(['POST']))
        def create_item(request, response):
            return response.status(201).send('created')
    """
    combined = combine_middleware(*middleware)

    def decorator(f: Handler):
        view = as_flask_view(combined(_mark_guards_passed(f)))

        if is_async_handler(view):
            @wraps(view)
            async def async_guarded_view(*args, **kwargs):
                g.guarded = True
                return await view(*args, **kwargs)

            return async_guarded_view

        @wraps(view)
        def guarded_view(*args, **kwargs):
            g.guarded = True
            return view(*args, **kwargs)

        return guarded_view

    return decorator
