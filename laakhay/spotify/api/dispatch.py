"""Dispatch engine.

Architecture:
    A dispatch turns an ``Endpoint`` into an ``HttpRequest``, hands it to the
    caller's transport and classifies the raw response. The typed path
    decodes the JSON body into the requested type; the ignore path only
    checks the status. Blocking and awaitable forms share everything except
    the transport call itself.

Design Decisions:
    - Content-Length is only attached for POST and PUT
    - Transport exceptions that are not ``ApiError`` become ``ClientError``
    - No retries; every failure surfaces to the immediate caller
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..core.exceptions import ApiError, ClientError
from ..runtime.rest.models import HttpRequest, HttpResponse
from .classify import check_status, checked_json, decode
from .telemetry import log_request_dispatched, log_response_error

if TYPE_CHECKING:
    from ..runtime.rest.client import AsyncClient, Client
    from .endpoint import Endpoint


def endpoint_url(endpoint: Endpoint, client: Any) -> str:
    """Absolute URL of ``endpoint`` including its query string.

    Raises:
        UrlParseError: If the client cannot resolve the path
        UnsupportedUrlBaseError: If the endpoint's base is unknown
    """
    url = endpoint.url_base().endpoint_for(client, endpoint.path())
    return endpoint.parameters().add_to_url(url)


def build_request(endpoint: Endpoint, url: str) -> HttpRequest:
    """Build the wire request for ``endpoint`` against an already resolved URL.

    Raises:
        BodyError: If the endpoint body cannot be encoded
    """
    method = endpoint.method()
    headers: dict[str, str] = {}
    data = b""

    body = endpoint.body()
    if body is not None:
        content_type, data = body
        headers["Content-Type"] = content_type

    if method.sends_content_length:
        headers["Content-Length"] = str(len(data))

    return HttpRequest(method=method, url=url, headers=headers, body=data)


def send(client: Client, request: HttpRequest) -> HttpResponse:
    """Execute ``request`` on a blocking transport."""
    try:
        return client.rest(request)
    except ApiError:
        raise
    except Exception as exc:
        raise ClientError(exc) from exc


async def send_async(client: AsyncClient, request: HttpRequest) -> HttpResponse:
    """Execute ``request`` on an awaitable transport."""
    try:
        return await client.rest_async(request)
    except ApiError:
        raise
    except Exception as exc:
        raise ClientError(exc) from exc


def _prepare(endpoint: Endpoint, client: Any) -> HttpRequest:
    request = build_request(endpoint, endpoint_url(endpoint, client))
    log_request_dispatched(request=request, endpoint=endpoint.path())
    return request


def _typed(endpoint: Endpoint, response: HttpResponse, into: Any) -> Any:
    try:
        value = checked_json(response)
    except ApiError as exc:
        log_response_error(
            endpoint=endpoint.path(), status=response.status, error_type=type(exc).__name__
        )
        raise
    return decode(value, into)


def _ignored(endpoint: Endpoint, response: HttpResponse) -> None:
    try:
        check_status(response)
    except ApiError as exc:
        log_response_error(
            endpoint=endpoint.path(), status=response.status, error_type=type(exc).__name__
        )
        raise


def query(endpoint: Endpoint, client: Client, into: Any = Any) -> Any:
    """Dispatch ``endpoint`` and decode the JSON response into ``into``.

    Raises:
        ApiError: Any of the dispatch failures
    """
    request = _prepare(endpoint, client)
    response = send(client, request)
    return _typed(endpoint, response, into)


async def query_async(endpoint: Endpoint, client: AsyncClient, into: Any = Any) -> Any:
    """Asynchronous counterpart of ``query``."""
    request = _prepare(endpoint, client)
    response = await send_async(client, request)
    return _typed(endpoint, response, into)


def query_ignore(endpoint: Endpoint, client: Client) -> None:
    """Dispatch ``endpoint`` and only check the response status."""
    request = _prepare(endpoint, client)
    response = send(client, request)
    _ignored(endpoint, response)


async def query_ignore_async(endpoint: Endpoint, client: AsyncClient) -> None:
    """Asynchronous counterpart of ``query_ignore``."""
    request = _prepare(endpoint, client)
    response = await send_async(client, request)
    _ignored(endpoint, response)
