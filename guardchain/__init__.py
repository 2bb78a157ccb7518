# SPDX-License-Identifier: Apache-2.0

"""
Composable request guards for HTTP function handlers.

Guards wrap a handler and decide whether a call reaches it: allowed HTTP
methods, allowed content types, authorization and CORS preflight handling.
"""

from .middleware import (
    combine_middleware,
    with_http_methods,
    with_content_types,
    with_authorization,
    with_cors,
    AuthorizationParseError,
)
from .models import (
    AuthorizationResult,
    ContentTypesConfig,
    CORSConfig,
    HttpMethod,
    HttpMethodsConfig,
    ShortCircuit,
)
from .http import Request, Response, SimpleRequest, SimpleResponse

__version__ = "1.0.0"

__all__ = [
    "combine_middleware",
    "with_http_methods",
    "with_content_types",
    "with_authorization",
    "with_cors",
    "AuthorizationParseError",
    "AuthorizationResult",
    "ContentTypesConfig",
    "CORSConfig",
    "HttpMethod",
    "HttpMethodsConfig",
    "ShortCircuit",
    "Request",
    "Response",
    "SimpleRequest",
    "SimpleResponse",
]
