"""Unit tests for the client credentials flow."""

import base64
from urllib.parse import parse_qsl

import pytest

from laakhay.spotify.auth import ClientCredentials
from laakhay.spotify.config import TOKEN_URL
from laakhay.spotify.core import HttpMethod, NoRefreshTokenError, ServiceMessageError


class TestClientCredentials:
    """Test ClientCredentials."""

    def test_authorization_header(self):
        flow = ClientCredentials("my-id", "my-secret")
        header = flow.authorization_header()
        assert header.startswith("Basic ")
        assert base64.b64decode(header[len("Basic ") :]) == b"my-id:my-secret"

    def test_token_request(self, token_http):
        http = token_http()
        token = ClientCredentials("my-id", "my-secret").request_token(http)

        request = http.last_request
        assert request.method == HttpMethod.POST
        assert request.url == TOKEN_URL
        assert request.body == b"grant_type=client_credentials"
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert request.headers["Content-Length"] == str(len(request.body))
        assert request.headers["Authorization"] == ClientCredentials(
            "my-id", "my-secret"
        ).authorization_header()
        assert parse_qsl(request.body.decode()) == [("grant_type", "client_credentials")]

        assert token.access_token == "access"
        assert token.expires_in == 3600

    def test_error_response(self, token_http):
        http = token_http({"error": "invalid_client"}, status=400)
        with pytest.raises(ServiceMessageError) as exc_info:
            ClientCredentials("my-id", "wrong").request_token(http)
        assert exc_info.value.message == "invalid_client"

    def test_no_refresh_grant(self, token_http):
        with pytest.raises(NoRefreshTokenError):
            ClientCredentials("my-id", "my-secret").refresh_token(token_http(), "refresh")

    def test_repr_hides_secret(self):
        assert "my-secret" not in repr(ClientCredentials("my-id", "my-secret"))

    @pytest.mark.asyncio
    async def test_async_token_request(self, async_token_http):
        http = async_token_http()
        token = await ClientCredentials("my-id", "my-secret").request_token_async(http)
        assert token.refresh_token == "refresh"
        assert http.last_request.body == b"grant_type=client_credentials"
