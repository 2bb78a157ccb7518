# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
HTTP method guard.
"""

from typing import Iterable, Optional
from opentelemetry import trace
import logging

from ..models.config import HttpMethodsConfig
from ..models.responses import METHOD_NOT_ALLOWED, ShortCircuit
from .base import Middleware, guard

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)


def with_http_methods(methods: Iterable[str]) -> Middleware:
    """
    Limit a handler to the given HTTP methods.

    Requests with any other method get 405 Method Not Allowed. Matching is
    an exact, case-sensitive comparison.

    Args:
        methods: Allowed method tokens, e.g. ["GET", "POST"]

    Returns:
        Middleware function

    Raises:
        pydantic.ValidationError: If the list is empty or has unknown tokens
    """
    config = HttpMethodsConfig(methods=tuple(methods))

    def check(request) -> Optional[ShortCircuit]:
        with tracer.start_as_current_span("guard.http_methods") as span:
            span.set_attribute("http.method", str(request.method))

            if request.method not in config.methods:
                span.set_attribute("guard.result", "method_not_allowed")
                logger.warning(
                    f"Rejected request with method {request.method!r}",
                    extra={"method": request.method, "allowed_methods": list(config.methods)}
                )
                return METHOD_NOT_ALLOWED

            span.set_attribute("guard.result", "allowed")
            return None

    middleware = guard(check)
    middleware.config = config
    return middleware
