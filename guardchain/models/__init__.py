# SPDX-License-Identifier: Apache-2.0

"""
Configuration and decision models for guards.
"""

from .enums import HttpMethod, AuthorizationResult
from .config import HttpMethodsConfig, ContentTypesConfig, CORSConfig, DEFAULT_MAX_AGE
from .responses import ShortCircuit

__all__ = [
    "HttpMethod",
    "AuthorizationResult",
    "HttpMethodsConfig",
    "ContentTypesConfig",
    "CORSConfig",
    "DEFAULT_MAX_AGE",
    "ShortCircuit",
]
