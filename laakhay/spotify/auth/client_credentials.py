"""Client credentials flow.

Server-to-server authentication with the application's own credentials.
Gives access to catalog data only (no user resources) and has no refresh
grant: request a new token when the current one expires.
"""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING

from ..api.params import FormParams
from ..models.token import Token
from .base import AuthFlow, request_token, request_token_async

if TYPE_CHECKING:
    from ..runtime.rest.http_client import HTTPClient
    from ..runtime.rest.sync_client import SyncHTTPClient


class ClientCredentials(AuthFlow):
    """Client credentials flow for a registered application."""

    def __init__(self, client_id: str, client_secret: str) -> None:
        self.client_id = client_id
        self.client_secret = client_secret

    def __repr__(self) -> str:
        return f"ClientCredentials(client_id={self.client_id!r})"

    def authorization_header(self) -> str:
        """``Basic`` header value carrying ``client_id:client_secret``."""
        credentials = f"{self.client_id}:{self.client_secret}".encode()
        return "Basic " + base64.b64encode(credentials).decode("ascii")

    def token_params(self) -> FormParams:
        return FormParams().push("grant_type", "client_credentials")

    def request_token(self, http: SyncHTTPClient) -> Token:
        """Request an access token from the accounts service."""
        return request_token(http, self.token_params(), self.authorization_header())

    async def request_token_async(self, http: HTTPClient) -> Token:
        return await request_token_async(http, self.token_params(), self.authorization_header())
