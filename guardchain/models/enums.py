# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Enumeration types used by guard configuration and decisions.
"""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP method tokens accepted by the method guard."""
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"


class AuthorizationResult(str, Enum):
    """Outcome of evaluating an Authorization header."""
    ALLOWED = "allowed"
    DENIED = "denied"
    UNPARSEABLE = "unparseable"

    @classmethod
    def from_verdict(cls, verdict) -> "AuthorizationResult":
        """Normalise an authorizer verdict (bool-like or result) into a result."""
        if isinstance(verdict, cls):
            return verdict
        return cls.ALLOWED if verdict else cls.DENIED
