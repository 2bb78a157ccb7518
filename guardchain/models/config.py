# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Immutable configuration models for the built-in guards.
"""

import os
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from .enums import HttpMethod

# Access-Control-Max-Age sent when no max age is configured
DEFAULT_MAX_AGE = 5


class GuardConfig(BaseModel):
    """Base model for guard configuration."""

    model_config = ConfigDict(
        # Configuration is read-only once a guard is built
        frozen=True,
        # Allow population by field name or alias
        populate_by_name=True,
        # Use enum values instead of enum objects
        use_enum_values=True,
    )


class HttpMethodsConfig(GuardConfig):
    """Allowed HTTP methods, matched case-sensitively."""

    methods: Tuple[HttpMethod, ...] = Field(..., min_length=1, description="Allowed method tokens")


class ContentTypesConfig(GuardConfig):
    """Allowed media types, expected to be lowercase already."""

    content_types: Tuple[str, ...] = Field(
        ..., alias="contentTypes", min_length=1, description="Allowed media types"
    )


class CORSConfig(GuardConfig):
    """CORS preflight response configuration."""

    allow_origin: str = Field(..., alias="allowOrigin", description="Access-Control-Allow-Origin value")
    allow_headers: str = Field(..., alias="allowHeaders", description="Access-Control-Allow-Headers value")
    allow_methods: str = Field(..., alias="allowMethods", description="Access-Control-Allow-Methods and Allow value")
    allow_credentials: bool = Field(default=False, alias="allowCredentials", description="Send Access-Control-Allow-Credentials")
    max_age: Optional[int] = Field(default=None, alias="maxAge", ge=0, description="Preflight cache duration in seconds")

    @property
    def effective_max_age(self) -> int:
        """Configured max age, or the default when none was given. Zero is kept."""
        return DEFAULT_MAX_AGE if self.max_age is None else self.max_age

    @classmethod
    def from_env(cls) -> "CORSConfig":
        """
        Build a CORS configuration from environment variables.

        Reads CORS_ALLOW_ORIGIN, CORS_ALLOW_HEADERS, CORS_ALLOW_METHODS,
        CORS_ALLOW_CREDENTIALS and CORS_MAX_AGE.

        Returns:
            CORSConfig instance
        """
        max_age = os.getenv('CORS_MAX_AGE')

        return cls(
            allow_origin=os.getenv('CORS_ALLOW_ORIGIN', '*'),
            allow_headers=os.getenv('CORS_ALLOW_HEADERS', 'Content-Type, Authorization'),
            allow_methods=os.getenv('CORS_ALLOW_METHODS', 'GET, POST, OPTIONS'),
            allow_credentials=os.getenv('CORS_ALLOW_CREDENTIALS', 'false').lower() == 'true',
            max_age=int(max_age) if max_age not in (None, '') else None,
        )
