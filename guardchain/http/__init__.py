# SPDX-License-Identifier: Apache-2.0

"""
Request/response capability consumed by guards.
"""

from .exchange import Request, Response, SimpleRequest, SimpleResponse, ResponseAlreadySentError

__all__ = [
    "Request",
    "Response",
    "SimpleRequest",
    "SimpleResponse",
    "ResponseAlreadySentError",
]
