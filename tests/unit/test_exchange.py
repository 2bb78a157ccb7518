# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the in-memory request/response capability and short-circuits.
"""

import pytest
from unittest.mock import Mock

from guardchain.http import SimpleRequest, SimpleResponse, ResponseAlreadySentError, Request, Response
from guardchain.models import ShortCircuit


class TestSimpleExchange:

    def test_headers_are_case_insensitive(self):
        request = SimpleRequest('GET', {'Content-Type': 'application/json'})

        assert request.headers.get('content-type') == 'application/json'
        assert request.headers.get('authorization') is None

    def test_satisfies_protocols(self):
        assert isinstance(SimpleRequest('GET'), Request)
        assert isinstance(SimpleResponse(), Response)

    def test_writes_after_send_fail(self):
        response = SimpleResponse().status(204)
        response.send()

        assert response.body == ''
        with pytest.raises(ResponseAlreadySentError):
            response.set_header('Allow', 'GET')
        with pytest.raises(ResponseAlreadySentError):
            response.send('again')


class TestShortCircuit:

    def test_write_order(self):
        response = Mock()
        ShortCircuit(status=204, headers=(('Allow', 'GET'),)).write(response)

        assert [call[0] for call in response.method_calls] == ['status', 'set_header', 'send']
        response.send.assert_called_once_with('')

    def test_returns_send_result(self):
        response = Mock()
        response.send.return_value = 'sent'

        assert ShortCircuit(status=401, body='Unauthorized').write(response) == 'sent'

    def test_invalid_status(self):
        with pytest.raises(ValueError):
            ShortCircuit(status=42)
