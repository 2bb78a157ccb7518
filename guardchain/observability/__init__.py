# SPDX-License-Identifier: Apache-2.0

"""
Tracing and logging setup.
"""

from .config import setup_observability, setup_structured_logging
from .middleware import add_observability_middleware

__all__ = ["setup_observability", "setup_structured_logging", "add_observability_middleware"]
