"""Authorization code flow with PKCE.

For applications acting on behalf of a user without holding a client
secret. The flow runs in three steps:

    1. ``user_authorization_url()`` generates a state and a code verifier
       and returns the URL the user opens to grant access
    2. the accounts service redirects to ``redirect_uri`` with ``code`` and
       ``state``; ``verify_authorization_code()`` checks the state
    3. ``request_token()`` exchanges the code for a token

Tokens obtained this way carry a refresh token.
"""

from __future__ import annotations

import base64
import hashlib
import secrets
import string
from collections.abc import Iterable
from typing import TYPE_CHECKING
from urllib.parse import parse_qsl, urlsplit

from ..api.params import FormParams, QueryParams
from ..config import AUTHORIZE_URL, CODE_VERIFIER_LENGTH, STATE_LENGTH
from ..core.exceptions import (
    CodeNotFoundError,
    InvalidStateError,
    NoCodeVerifierError,
    NoStateError,
    UrlParseError,
)
from ..models.token import Token
from .base import AuthFlow, request_token, request_token_async
from .scopes import Scope, scopes_to_string

if TYPE_CHECKING:
    from ..runtime.rest.http_client import HTTPClient
    from ..runtime.rest.sync_client import SyncHTTPClient

CHARSET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "-._~"

MIN_VERIFIER_LENGTH = 43
MAX_VERIFIER_LENGTH = 128


def random_string(length: int) -> str:
    """Random string over the unreserved URL characters."""
    return "".join(secrets.choice(CHARSET) for _ in range(length))


def generate_code_verifier(length: int = CODE_VERIFIER_LENGTH) -> str:
    """PKCE code verifier; ``length`` is clamped to 43..128."""
    length = max(MIN_VERIFIER_LENGTH, min(length, MAX_VERIFIER_LENGTH))
    return random_string(length)


def generate_code_challenge(code_verifier: str) -> str:
    """S256 challenge: unpadded URL-safe base64 of the verifier's SHA-256."""
    digest = hashlib.sha256(code_verifier.encode("ascii")).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


class AuthCodePKCE(AuthFlow):
    """Authorization code with PKCE flow state for one authorization."""

    def __init__(
        self,
        client_id: str,
        redirect_uri: str,
        scopes: Iterable[Scope] | Scope | None = None,
    ) -> None:
        self.client_id = client_id
        self.redirect_uri = redirect_uri
        self.scopes = scopes
        self.state: str | None = None
        self.code_verifier: str | None = None

    def __repr__(self) -> str:
        return f"AuthCodePKCE(client_id={self.client_id!r}, redirect_uri={self.redirect_uri!r})"

    @property
    def scopes(self) -> set[Scope] | None:
        return self._scopes

    @scopes.setter
    def scopes(self, value: Iterable[Scope] | Scope | None) -> None:
        if value is None:
            self._scopes = None
        elif isinstance(value, Scope):
            self._scopes = {value}
        else:
            self._scopes = {Scope(scope) for scope in value}

    def user_authorization_url(self) -> str:
        """Generate a new state and code verifier and build the authorize URL.

        Every call invalidates the previous state and verifier.
        """
        code_verifier = generate_code_verifier(CODE_VERIFIER_LENGTH)
        code_challenge = generate_code_challenge(code_verifier)
        state = random_string(STATE_LENGTH)

        params = (
            QueryParams()
            .push("client_id", self.client_id)
            .push("response_type", "code")
            .push("redirect_uri", self.redirect_uri)
            .push("state", state)
            .push_opt("scope", scopes_to_string(self._scopes) if self._scopes else None)
            .push("code_challenge_method", "S256")
            .push("code_challenge", code_challenge)
        )

        self.state = state
        self.code_verifier = code_verifier
        return params.add_to_url(AUTHORIZE_URL)

    def verify_authorization_code(self, url: str) -> str:
        """Extract the authorization code from the redirect URL.

        Raises:
            NoStateError: If no authorization URL was generated yet
            CodeNotFoundError: If the URL has no ``code``
            InvalidStateError: If ``state`` is missing or does not match
            UrlParseError: If ``url`` cannot be parsed
        """
        if self.state is None:
            raise NoStateError()

        try:
            query = urlsplit(url).query
        except ValueError as exc:
            raise UrlParseError(url, str(exc)) from exc

        code: str | None = None
        state: str | None = None
        for key, value in parse_qsl(query):
            if key == "code":
                code = value
            elif key == "state":
                state = value

        if code is None:
            raise CodeNotFoundError()
        if state != self.state:
            raise InvalidStateError(self.state, state)
        return code

    def token_params(self, code: str) -> FormParams:
        if self.code_verifier is None:
            raise NoCodeVerifierError()
        return (
            FormParams()
            .push("grant_type", "authorization_code")
            .push("code", code)
            .push("redirect_uri", self.redirect_uri)
            .push("client_id", self.client_id)
            .push("code_verifier", self.code_verifier)
        )

    def refresh_params(self, refresh_token: str) -> FormParams:
        return (
            FormParams()
            .push("grant_type", "refresh_token")
            .push("refresh_token", refresh_token)
            .push("client_id", self.client_id)
        )

    def request_token(self, http: SyncHTTPClient, code: str) -> Token:
        """Exchange an authorization code for a token.

        Raises:
            NoCodeVerifierError: If no authorization URL was generated yet
        """
        return request_token(http, self.token_params(code))

    async def request_token_async(self, http: HTTPClient, code: str) -> Token:
        return await request_token_async(http, self.token_params(code))

    def request_token_from_redirect_url(self, http: SyncHTTPClient, url: str) -> Token:
        """Verify the redirect URL and exchange its code for a token."""
        code = self.verify_authorization_code(url)
        return request_token(http, self.token_params(code))

    async def request_token_from_redirect_url_async(self, http: HTTPClient, url: str) -> Token:
        code = self.verify_authorization_code(url)
        return await request_token_async(http, self.token_params(code))

    def refresh_token(self, http: SyncHTTPClient, refresh_token: str) -> Token:
        return request_token(http, self.refresh_params(refresh_token))

    async def refresh_token_async(self, http: HTTPClient, refresh_token: str) -> Token:
        return await request_token_async(http, self.refresh_params(refresh_token))
