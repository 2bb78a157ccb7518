# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Short-circuit responses written by guards instead of delegating.
"""

from typing import Any, Tuple
from pydantic import BaseModel, ConfigDict, Field


class ShortCircuit(BaseModel):
    """A response a guard writes when it stops the request."""

    model_config = ConfigDict(frozen=True)

    status: int = Field(..., ge=100, le=599, description="HTTP status code")
    body: str = Field(default="", description="Response body")
    headers: Tuple[Tuple[str, str], ...] = Field(
        default=(), description="Ordered (name, value) header pairs"
    )

    def write(self, response) -> Any:
        """
        Write this short-circuit to a response.

        Args:
            response: Response capability

        Returns:
            Whatever ``response.send`` returns
        """
        response.status(self.status)
        for name, value in self.headers:
            response.set_header(name, value)
        return response.send(self.body)


METHOD_NOT_ALLOWED = ShortCircuit(status=405, body="Method Not Allowed")
UNSUPPORTED_MEDIA_TYPE = ShortCircuit(status=415, body="Unsupported Media Type")
UNAUTHORIZED = ShortCircuit(status=401, body="Unauthorized")
FORBIDDEN = ShortCircuit(status=403, body="Forbidden")
