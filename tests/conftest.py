# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Pytest configuration and fixtures.
"""

import os
import pytest
from unittest.mock import Mock, AsyncMock

from guardchain.http.exchange import SimpleRequest, SimpleResponse

# Keep tracing off unless a test installs a provider
os.environ.setdefault('OTEL_ENABLED', 'false')


def create_request(method=None, headers=None):
    """Build a request the way a host would hand it to a guard."""
    return SimpleRequest(method=method, headers=headers)


def create_response():
    return SimpleResponse()


@pytest.fixture
def handler():
    """Terminal handler that records calls."""
    return Mock(name="handler", return_value="handled")


@pytest.fixture
def async_handler():
    """Coroutine terminal handler that records calls."""
    return AsyncMock(name="async_handler", return_value="handled")


@pytest.fixture
def cors_config_data():
    """CORS configuration as a host would write it."""
    return {
        "allowOrigin": "*",
        "allowCredentials": True,
        "allowHeaders": "x-special-header",
        "allowMethods": "GET",
        "maxAge": 0
    }
