# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Authorization guard.

The guard reads the raw Authorization header and hands it to an authorizer
supplied by the application. The authorizer owns the credential scheme:
it parses the header and returns a verdict, or raises when the header
cannot be parsed.
"""

import inspect
from typing import Any, Awaitable, Callable, Optional, Union
from opentelemetry import trace
import logging

from ..models.enums import AuthorizationResult
from ..models.responses import FORBIDDEN, UNAUTHORIZED, ShortCircuit
from .base import Middleware, async_guard

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)

Verdict = Union[bool, AuthorizationResult]
Authorizer = Callable[[str], Union[Verdict, Awaitable[Verdict]]]


class AuthorizationParseError(Exception):
    """Raised by authorizers when an Authorization header cannot be parsed."""

    def __init__(self, message: str = "Cannot parse authorization header"):
        self.message = message
        super().__init__(self.message)


async def evaluate_authorizer(authorizer: Authorizer, header_value: str) -> AuthorizationResult:
    """
    Run an authorizer and normalise its outcome.

    Args:
        authorizer: Authorizer callable, sync or async
        header_value: Raw Authorization header value

    Returns:
        ALLOWED or DENIED for a truthy or falsy verdict, UNPARSEABLE when
        the authorizer raised
    """
    try:
        verdict: Any = authorizer(header_value)
        if inspect.isawaitable(verdict):
            verdict = await verdict
        return AuthorizationResult.from_verdict(verdict)
    except Exception as e:
        logger.warning(f"Authorizer failed to evaluate header: {str(e)}")
        return AuthorizationResult.UNPARSEABLE


def with_authorization(authorizer: Authorizer) -> Middleware:
    """
    Require an Authorization header accepted by the authorizer.

    Missing or empty header, or one the authorizer cannot parse, gets
    401 Unauthorized. A parsed header the authorizer denies gets
    403 Forbidden.

    Args:
        authorizer: Callable taking the header value and returning (or
            resolving to) a bool or AuthorizationResult

    Returns:
        Middleware function producing coroutine handlers
    """
    if not callable(authorizer):
        raise TypeError(f"Authorizer must be callable, got {authorizer!r}")

    async def check(request) -> Optional[ShortCircuit]:
        with tracer.start_as_current_span("guard.authorization") as span:
            header = request.headers.get('authorization')

            if not header:
                span.set_attribute("guard.result", "missing_header")
                logger.warning("Authorization failed: missing authorization header")
                return UNAUTHORIZED

            outcome = await evaluate_authorizer(authorizer, header)
            span.set_attribute("guard.result", outcome.value)

            if outcome is AuthorizationResult.UNPARSEABLE:
                logger.warning("Authorization failed: header could not be parsed")
                return UNAUTHORIZED

            if outcome is AuthorizationResult.DENIED:
                logger.warning("Authorization failed: access denied")
                return FORBIDDEN

            logger.debug("Authorization successful")
            return None

    return async_guard(check)
