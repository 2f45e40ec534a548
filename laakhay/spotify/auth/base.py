"""Token endpoint plumbing shared by the OAuth flows.

The accounts service is not part of the Web API base URL, so token
requests bypass ``Endpoint`` dispatch. They are still classified exactly
like API responses.
"""

from __future__ import annotations

from abc import ABC
from typing import TYPE_CHECKING

from ..api.classify import checked_json, decode
from ..api.params import FormParams
from ..config import TOKEN_URL
from ..core.enums import HttpMethod
from ..core.exceptions import NoRefreshTokenError
from ..models.token import Token
from ..runtime.rest.models import HttpRequest, HttpResponse

if TYPE_CHECKING:
    from ..runtime.rest.http_client import HTTPClient
    from ..runtime.rest.sync_client import SyncHTTPClient


class AuthFlow(ABC):
    """Base class of the OAuth flows a ``Spotify`` client can use."""

    def refresh_token(self, http: SyncHTTPClient, refresh_token: str) -> Token:
        """Exchange a refresh token for a new access token.

        Raises:
            NoRefreshTokenError: If the flow has no refresh grant
        """
        raise NoRefreshTokenError()

    async def refresh_token_async(self, http: HTTPClient, refresh_token: str) -> Token:
        raise NoRefreshTokenError()


def token_request(params: FormParams, authorization: str | None = None) -> HttpRequest:
    """Build the POST request for the token endpoint.

    Raises:
        FormBodyError: If the parameters cannot be encoded
    """
    headers: dict[str, str] = {}
    if authorization is not None:
        headers["Authorization"] = authorization

    data = b""
    body = params.into_body()
    if body is not None:
        content_type, data = body
        headers["Content-Type"] = content_type
    headers["Content-Length"] = str(len(data))

    return HttpRequest(method=HttpMethod.POST, url=TOKEN_URL, headers=headers, body=data)


def parse_token(response: HttpResponse) -> Token:
    """Classify a token endpoint response and decode the token.

    Raises:
        ApiError: If the accounts service answered with an error
    """
    return decode(checked_json(response), Token)


def request_token(
    http: SyncHTTPClient, params: FormParams, authorization: str | None = None
) -> Token:
    return parse_token(http.send(token_request(params, authorization)))


async def request_token_async(
    http: HTTPClient, params: FormParams, authorization: str | None = None
) -> Token:
    return parse_token(await http.send(token_request(params, authorization)))
