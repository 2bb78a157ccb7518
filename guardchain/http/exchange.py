# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Minimal request/response capability.

Guards only need to read a request's method and headers and to write a
status, headers and a body to a response. Any host object with this shape
works; ``flask.request`` satisfies ``Request`` as-is. ``SimpleRequest`` and
``SimpleResponse`` are in-memory implementations for hosts without their own
objects and for tests.
"""

from typing import Any, Mapping, Optional, Protocol, Union, runtime_checkable
from werkzeug.datastructures import Headers


class ResponseAlreadySentError(RuntimeError):
    """Raised when a response is written to after its body was sent."""


@runtime_checkable
class Request(Protocol):
    """Read side of an exchange."""

    method: Optional[str]
    headers: Any  # case-insensitive ``get(name)``


@runtime_checkable
class Response(Protocol):
    """Write side of an exchange."""

    def status(self, code: int) -> "Response": ...

    def set_header(self, name: str, value: str) -> "Response": ...

    def send(self, body: Optional[str] = None) -> Any: ...


class SimpleRequest:
    """In-memory request with case-insensitive headers."""

    def __init__(
        self,
        method: Optional[str] = None,
        headers: Optional[Union[Mapping[str, str], Headers]] = None
    ):
        self.method = method
        self.headers = Headers(headers) if headers else Headers()

    def __repr__(self) -> str:
        return f"SimpleRequest(method={self.method!r}, headers={dict(self.headers)!r})"


class SimpleResponse:
    """In-memory response that records what was written to it."""

    def __init__(self):
        self.status_code = 200
        self.headers = Headers()
        self.body: Optional[str] = None
        self.sent = False

    def _ensure_writable(self):
        if self.sent:
            raise ResponseAlreadySentError("Response body already sent")

    def status(self, code: int) -> "SimpleResponse":
        self._ensure_writable()
        self.status_code = code
        return self

    def set_header(self, name: str, value: str) -> "SimpleResponse":
        self._ensure_writable()
        self.headers.set(name, str(value))
        return self

    def send(self, body: Optional[str] = None) -> "SimpleResponse":
        """Send the body and close the response to further writes."""
        self._ensure_writable()
        self.body = body if body is not None else ""
        self.sent = True
        return self
