# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for observability setup.
"""

import logging
import pytest
from unittest.mock import patch
from flask import Flask
from opentelemetry.sdk.trace import TracerProvider

from guardchain.observability import (
    setup_observability, setup_structured_logging, add_observability_middleware
)
from guardchain.http.flask_adapter import guarded
from guardchain.middleware import with_http_methods


@pytest.fixture
def restore_logging():
    """Put root and package logger state back after logging setup."""
    root = logging.getLogger()
    package = logging.getLogger('guardchain')
    root_level, root_handlers = root.level, list(root.handlers)
    package_level = package.level

    yield

    for handler in root.handlers[:]:
        if handler not in root_handlers:
            root.removeHandler(handler)
    root.setLevel(root_level)
    package.setLevel(package_level)


class TestSetupObservability:

    def test_disabled(self, monkeypatch):
        monkeypatch.setenv('OTEL_ENABLED', 'false')

        assert setup_observability() is None

    @patch('guardchain.observability.config.setup_structured_logging')
    @patch('guardchain.observability.config.trace.set_tracer_provider')
    def test_production_sampling(self, mock_set_provider, mock_logging, monkeypatch):
        monkeypatch.setenv('OTEL_ENABLED', 'true')
        monkeypatch.setenv('ENVIRONMENT', 'production')
        monkeypatch.delenv('OTEL_EXPORTER_OTLP_ENDPOINT', raising=False)

        provider = setup_observability('orders-api')

        assert isinstance(provider, TracerProvider)
        assert provider.sampler.rate == 0.1
        assert provider.resource.attributes['service.name'] == 'orders-api'
        mock_set_provider.assert_called_once_with(provider)
        mock_logging.assert_called_once_with('production')

    def test_development_logging_level(self, restore_logging):
        setup_structured_logging('development')

        assert logging.getLogger('guardchain').level == logging.DEBUG


class TestObservabilityMiddleware:

    def setup_method(self):
        """Set up test fixtures."""
        self.app = add_observability_middleware(Flask(__name__))

        @self.app.route('/ping', methods=['GET', 'POST'])
        @guarded(with_http_methods(['GET']))
        def ping(request, response):
            return response.send('pong')

        @self.app.route('/plain')
        def plain():
            return 'plain'

    def logged_record(self, caplog, path, method='GET'):
        with caplog.at_level(logging.INFO, logger='guardchain.observability.middleware'):
            with self.app.test_client() as client:
                client.open(path, method=method)

        records = [r for r in caplog.records if r.name == 'guardchain.observability.middleware']
        assert len(records) == 1
        return records[0]

    def test_request_logged(self, caplog):
        record = self.logged_record(caplog, '/ping')

        assert record.getMessage() == 'HTTP request completed'
        assert record.extra_fields['guard_result'] == 'passed'
        assert record.extra_fields['status_code'] == 200

    def test_short_circuit_logged(self, caplog):
        record = self.logged_record(caplog, '/ping', method='POST')

        assert record.getMessage() == 'Request answered by guard with status 405'
        assert record.extra_fields['guard_result'] == 'short_circuit'

    def test_unguarded_view_has_no_guard_result(self, caplog):
        record = self.logged_record(caplog, '/plain')

        assert 'guard_result' not in record.extra_fields
