"""Spotify Web API client.

Architecture:
    ``Spotify`` is the concrete transport handed to ``Endpoint.query`` and
    the paging helpers. It implements both halves of the transport
    contract: blocking requests go through an httpx ``SyncHTTPClient`` and
    awaitable requests through an aiohttp ``HTTPClient``. Every request gets
    an ``Authorization: Bearer`` header from the current token.

Design Decisions:
    - The OAuth flow is a strategy object (``ClientCredentials`` or
      ``AuthCodePKCE``); flow-specific methods check which one is in use
    - An expired token with a refresh token is refreshed before the next
      request when ``auto_refresh`` is on; callbacks registered with
      ``on_token_refresh`` see every refreshed token
    - Failures raised here surface from dispatch as ``ClientError`` unless
      they already are ``ApiError``s

Example:
    >>> spotify = Spotify.with_client_credentials(client_id, client_secret)
    >>> spotify.request_token()
    >>> album = GetAlbum(id="4aawyAB9vmqN3uQ7FjRGTy").query(spotify, Album)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from urllib.parse import urljoin, urlsplit

from .auth.base import AuthFlow
from .auth.client_credentials import ClientCredentials
from .auth.pkce import AuthCodePKCE
from .auth.scopes import Scope
from .config import BASE_API_URL, DEFAULT_TIMEOUT
from .core.exceptions import EmptyAccessTokenError, NoRefreshTokenError, UrlParseError
from .models.token import Token
from .runtime.rest.client import AsyncClient, Client
from .runtime.rest.http_client import HTTPClient
from .runtime.rest.models import HttpRequest, HttpResponse
from .runtime.rest.sync_client import SyncHTTPClient

logger = logging.getLogger(__name__)

TokenCallback = Callable[[Token], None]


class Spotify(Client, AsyncClient):
    """Authenticated Web API client usable from sync and async code."""

    def __init__(
        self,
        auth: AuthFlow,
        *,
        api_url: str = BASE_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        token: Token | None = None,
        auto_refresh: bool = True,
        http: SyncHTTPClient | None = None,
        async_http: HTTPClient | None = None,
    ) -> None:
        parts = urlsplit(api_url)
        if not parts.scheme or not parts.netloc:
            raise UrlParseError(api_url)
        # Endpoint paths are joined relative to the base
        self.api_url = api_url if api_url.endswith("/") else api_url + "/"
        self.auth = auth
        self.auto_refresh = auto_refresh
        self.http = http or SyncHTTPClient(timeout)
        self.async_http = async_http or HTTPClient(timeout)
        self._token: Token | None = None
        self._refresh_callbacks: list[TokenCallback] = []
        if token is not None:
            self.set_token(token)

    @classmethod
    def with_client_credentials(cls, client_id: str, client_secret: str, **kwargs) -> Spotify:
        """Client for the client credentials flow (catalog data only)."""
        return cls(ClientCredentials(client_id, client_secret), **kwargs)

    @classmethod
    def with_authorization_code_pkce(
        cls,
        client_id: str,
        redirect_uri: str,
        scopes: Iterable[Scope] | Scope | None = None,
        **kwargs,
    ) -> Spotify:
        """Client for the authorization code with PKCE flow (user resources)."""
        return cls(AuthCodePKCE(client_id, redirect_uri, scopes), **kwargs)

    def __repr__(self) -> str:
        return f"Spotify(auth={self.auth!r}, api_url={self.api_url!r})"

    # --- token management ---------------------------------------------------

    @property
    def token(self) -> Token | None:
        """The current token, if one was obtained or restored."""
        return self._token

    def set_token(self, token: Token) -> None:
        """Use a previously saved token.

        ``expires_at`` is computed from ``expires_in`` when the token does not
        carry one.
        """
        self._token = token if token.expires_at is not None else token.stamped()

    def on_token_refresh(self, callback: TokenCallback) -> Spotify:
        """Register ``callback`` to receive every refreshed token."""
        self._refresh_callbacks.append(callback)
        return self

    def _acquired(self, token: Token) -> None:
        self._token = token.stamped()
        logger.info(
            "token_acquired",
            extra={
                "flow": type(self.auth).__name__,
                "expires_in": token.expires_in,
                "scopes": token.scopes,
            },
        )

    def _refreshed(self, token: Token) -> None:
        previous = self._token
        if previous is not None:
            token = token.refreshed_from(previous)
        self._token = token.stamped()
        logger.info(
            "token_refreshed",
            extra={"flow": type(self.auth).__name__, "expires_in": token.expires_in},
        )
        for callback in self._refresh_callbacks:
            callback(self._token)

    def _refresh_token_value(self) -> str:
        if self._token is None or self._token.refresh_token is None:
            raise NoRefreshTokenError()
        return self._token.refresh_token

    def _pkce(self) -> AuthCodePKCE:
        if not isinstance(self.auth, AuthCodePKCE):
            raise TypeError(f"{type(self.auth).__name__} is not the authorization code flow")
        return self.auth

    def _needs_refresh(self) -> bool:
        return (
            self.auto_refresh
            and self._token is not None
            and self._token.refresh_token is not None
            and self._token.is_expired()
        )

    def request_token(self) -> None:
        """Obtain a token with the client credentials flow."""
        if not isinstance(self.auth, ClientCredentials):
            raise TypeError("request_token() without a code needs the client credentials flow")
        self._acquired(self.auth.request_token(self.http))

    async def request_token_async(self) -> None:
        if not isinstance(self.auth, ClientCredentials):
            raise TypeError("request_token() without a code needs the client credentials flow")
        self._acquired(await self.auth.request_token_async(self.async_http))

    def user_authorization_url(self) -> str:
        """Authorization URL to send the user to (PKCE flow)."""
        return self._pkce().user_authorization_url()

    def verify_authorization_code(self, url: str) -> str:
        return self._pkce().verify_authorization_code(url)

    def request_token_from_code(self, code: str) -> None:
        """Exchange an authorization code for a token (PKCE flow)."""
        self._acquired(self._pkce().request_token(self.http, code))

    async def request_token_from_code_async(self, code: str) -> None:
        self._acquired(await self._pkce().request_token_async(self.async_http, code))

    def request_token_from_redirect_url(self, url: str) -> None:
        """Verify the redirect URL and exchange its code for a token (PKCE flow)."""
        self._acquired(self._pkce().request_token_from_redirect_url(self.http, url))

    async def request_token_from_redirect_url_async(self, url: str) -> None:
        pkce = self._pkce()
        self._acquired(await pkce.request_token_from_redirect_url_async(self.async_http, url))

    def refresh_token(self) -> None:
        """Refresh the current token.

        Raises:
            NoRefreshTokenError: Without a token carrying a refresh token, or
                with a flow that has no refresh grant
        """
        refresh_token = self._refresh_token_value()
        self._refreshed(self.auth.refresh_token(self.http, refresh_token))

    async def refresh_token_async(self) -> None:
        refresh_token = self._refresh_token_value()
        self._refreshed(await self.auth.refresh_token_async(self.async_http, refresh_token))

    # --- transport contract -------------------------------------------------

    def rest_endpoint(self, endpoint: str) -> str:
        url = urljoin(self.api_url, endpoint)
        parts = urlsplit(url)
        if not parts.scheme or not parts.netloc:
            raise UrlParseError(url)
        logger.debug("rest_endpoint", extra={"endpoint": endpoint})
        return url

    def _authorized(self, request: HttpRequest) -> HttpRequest:
        if self._token is None or not self._token.access_token:
            raise EmptyAccessTokenError()
        headers = dict(request.headers)
        headers["Authorization"] = f"Bearer {self._token.access_token}"
        return HttpRequest(method=request.method, url=request.url, headers=headers, body=request.body)

    def rest(self, request: HttpRequest) -> HttpResponse:
        if self._needs_refresh():
            self.refresh_token()
        return self.http.send(self._authorized(request))

    async def rest_async(self, request: HttpRequest) -> HttpResponse:
        if self._needs_refresh():
            await self.refresh_token_async()
        return await self.async_http.send(self._authorized(request))

    # --- lifecycle ----------------------------------------------------------

    def close(self) -> None:
        """Close the blocking transport."""
        self.http.close()

    async def aclose(self) -> None:
        """Close both transports."""
        self.http.close()
        await self.async_http.close()

    def __enter__(self) -> Spotify:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    async def __aenter__(self) -> Spotify:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
