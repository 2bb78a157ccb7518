# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Content-Type guard.
"""

from typing import Iterable, Optional
from opentelemetry import trace
import logging

from ..models.config import ContentTypesConfig
from ..models.responses import UNSUPPORTED_MEDIA_TYPE, ShortCircuit
from .base import Middleware, guard

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)


def with_content_types(content_types: Iterable[str]) -> Middleware:
    """
    Limit a handler to the given content types.

    The request's Content-Type header is lowercased (a missing header counts
    as an empty string) and must equal one of the configured values, which
    are used as given and should already be lowercase. Anything else gets
    415 Unsupported Media Type.

    Args:
        content_types: Allowed media types, e.g. ["application/json"]

    Returns:
        Middleware function
    """
    config = ContentTypesConfig(content_types=tuple(content_types))

    def check(request) -> Optional[ShortCircuit]:
        content_type = (request.headers.get('content-type') or '').lower()

        with tracer.start_as_current_span("guard.content_types") as span:
            span.set_attribute("http.content_type", content_type)

            if content_type not in config.content_types:
                span.set_attribute("guard.result", "unsupported_media_type")
                logger.warning(
                    f"Rejected request with content type {content_type!r}",
                    extra={"content_type": content_type, "allowed_content_types": list(config.content_types)}
                )
                return UNSUPPORTED_MEDIA_TYPE

            span.set_attribute("guard.result", "allowed")
            return None

    middleware = guard(check)
    middleware.config = config
    return middleware
