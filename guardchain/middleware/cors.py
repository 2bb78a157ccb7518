# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
CORS preflight guard.
Answers OPTIONS requests with the configured CORS headers.
"""

from typing import Any, Dict, Optional, Union
from opentelemetry import trace
import logging

from ..models.config import CORSConfig
from ..models.responses import ShortCircuit
from .base import Middleware, guard

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)


def build_preflight_response(config: CORSConfig) -> ShortCircuit:
    """
    Build the 204 response sent for preflight requests.

    Args:
        config: CORS configuration

    Returns:
        ShortCircuit with the preflight headers and an empty body
    """
    headers = [
        ('Allow', config.allow_methods),
        ('Access-Control-Allow-Origin', config.allow_origin),
        ('Access-Control-Allow-Headers', config.allow_headers),
        ('Access-Control-Allow-Methods', config.allow_methods),
    ]

    if config.allow_credentials:
        headers.append(('Access-Control-Allow-Credentials', 'true'))

    headers.append(('Access-Control-Max-Age', str(config.effective_max_age)))

    return ShortCircuit(status=204, body='', headers=tuple(headers))


def with_cors(config: Union[CORSConfig, Dict[str, Any]]) -> Middleware:
    """
    Handle CORS preflight requests.

    OPTIONS requests (any case) are answered with 204 and the configured
    headers and never reach the next handler. Other requests pass through
    untouched. Put this guard first so preflights skip the other checks.

    Args:
        config: CORSConfig, or a dict of its fields (snake_case or camelCase)

    Returns:
        Middleware function
    """
    if not isinstance(config, CORSConfig):
        config = CORSConfig.model_validate(config)

    preflight = build_preflight_response(config)

    def check(request) -> Optional[ShortCircuit]:
        if (request.method or '').upper() != 'OPTIONS':
            return None

        with tracer.start_as_current_span("guard.cors") as span:
            span.set_attribute("guard.result", "preflight")
            logger.debug(
                "CORS preflight handled",
                extra={"origin": request.headers.get('Origin'), "allow_origin": config.allow_origin}
            )
            return preflight

    middleware = guard(check)
    middleware.config = config
    return middleware
