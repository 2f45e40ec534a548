"""Fake token endpoint transports for OAuth flow tests."""

from __future__ import annotations

import json

import pytest

from laakhay.spotify.runtime.rest import HttpRequest, HttpResponse

TOKEN_BODY = {
    "access_token": "access",
    "token_type": "Bearer",
    "expires_in": 3600,
    "refresh_token": "refresh",
    "scope": "user-read-private user-read-email",
}


class RecordingHTTP:
    """Stands in for both HTTP clients and answers every request the same way."""

    def __init__(self, body=None, status: int = 200):
        payload = TOKEN_BODY if body is None else body
        self.response = HttpResponse(status=status, headers={}, body=json.dumps(payload).encode())
        self.requests: list[HttpRequest] = []

    def send(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        return self.response

    @property
    def last_request(self) -> HttpRequest:
        return self.requests[-1]


class AsyncRecordingHTTP(RecordingHTTP):
    async def send(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        return self.response


@pytest.fixture
def token_http():
    """Factory for a blocking fake token endpoint."""
    return RecordingHTTP


@pytest.fixture
def async_token_http():
    """Factory for an awaitable fake token endpoint."""
    return AsyncRecordingHTTP
