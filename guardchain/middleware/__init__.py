# SPDX-License-Identifier: Apache-2.0

"""
Guards and their composition.
"""

from .compose import combine_middleware
from .methods import with_http_methods
from .content_type import with_content_types
from .auth import with_authorization, AuthorizationParseError
from .cors import with_cors

__all__ = [
    "combine_middleware",
    "with_http_methods",
    "with_content_types",
    "with_authorization",
    "AuthorizationParseError",
    "with_cors",
]
