"""Unit tests for the httpx-backed SyncHTTPClient."""

from __future__ import annotations

import httpx
import pytest

from laakhay.spotify.core import ClientError, HttpMethod
from laakhay.spotify.runtime.rest import HttpRequest, SyncHTTPClient, retry_after_hook


def client_for(handler, **kwargs) -> SyncHTTPClient:
    transport = httpx.MockTransport(handler)
    return SyncHTTPClient(client=httpx.Client(transport=transport), **kwargs)


class TestSyncHTTPClient:
    """Test SyncHTTPClient.send."""

    def test_send_returns_raw_response(self):
        """Test status, headers and body are returned untouched."""

        def handler(request):
            return httpx.Response(
                404, content=b'{"error": "missing"}', headers={"X-Request": "1"}
            )

        with client_for(handler) as client:
            response = client.send(HttpRequest(HttpMethod.GET, "https://api.example.com/v1/x"))

        assert response.status == 404
        assert response.body == b'{"error": "missing"}'
        assert response.header("x-request") == "1"

    def test_send_forwards_request(self):
        """Test method, URL, headers and body reach the wire."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(204)

        client = client_for(handler, user_agent="tests/1.0")
        client.send(
            HttpRequest(
                HttpMethod.POST,
                "https://api.example.com/v1/playlists/p/tracks?position=0",
                headers={"Content-Type": "application/json", "Content-Length": "2"},
                body=b"{}",
            )
        )

        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.example.com/v1/playlists/p/tracks?position=0"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["User-Agent"] == "tests/1.0"
        assert request.content == b"{}"

    def test_transport_error_wrapped(self):
        """Test httpx errors become ClientError."""

        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        client = client_for(handler)
        with pytest.raises(ClientError) as exc_info:
            client.send(HttpRequest(HttpMethod.GET, "https://api.example.com/v1/x"))
        assert isinstance(exc_info.value.source, httpx.ConnectError)

    def test_retry_after_hook_sets_throttle(self):
        """Test hooks see the httpx response and may set a throttle."""

        def handler(request):
            return httpx.Response(429, headers={"Retry-After": "2"})

        client = client_for(handler)
        client.add_response_hook(retry_after_hook)
        response = client.send(HttpRequest(HttpMethod.GET, "https://api.example.com/v1/x"))

        assert response.status == 429
        assert client._throttle_until is not None

    def test_set_throttle_zero_does_nothing(self):
        client = client_for(lambda request: httpx.Response(200))
        client.set_throttle(0)
        assert client._throttle_until is None
