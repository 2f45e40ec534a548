"""In-memory transports for unit tests.

``SingleTestClient`` answers every request with one canned response.
``PagedTestClient`` serves slices of a list as ``Page`` objects, honouring
the ``offset``/``limit`` query parameters and linking pages with absolute
``next``/``previous`` URLs the way the Web API does.
"""

from __future__ import annotations

import json
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import pytest

from laakhay.spotify.runtime.rest import AsyncClient, Client, HttpRequest, HttpResponse

API_BASE = "https://api.spotify.com/v1/"
DEFAULT_LIMIT = 20


class SingleTestClient(Client, AsyncClient):
    """Returns the same response for every request and records requests."""

    def __init__(self, body: bytes | str = b"", status: int = 200, headers=None):
        if isinstance(body, str):
            body = body.encode()
        self.response = HttpResponse(status=status, headers=dict(headers or {}), body=body)
        self.requests: list[HttpRequest] = []

    def rest_endpoint(self, endpoint: str) -> str:
        return API_BASE + endpoint

    def rest(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        return self.response

    async def rest_async(self, request: HttpRequest) -> HttpResponse:
        return self.rest(request)

    @property
    def last_request(self) -> HttpRequest:
        return self.requests[-1]


class PagedTestClient(Client, AsyncClient):
    """Serves ``data`` page by page."""

    def __init__(self, data, status: int = 200):
        self.data = list(data)
        self.status = status
        self.requests: list[HttpRequest] = []

    def rest_endpoint(self, endpoint: str) -> str:
        return API_BASE + endpoint

    def rest(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        parts = urlsplit(request.url)
        query = dict(parse_qsl(parts.query))
        offset = int(query.get("offset", 0))
        limit = int(query.get("limit", DEFAULT_LIMIT))
        end = min(offset + limit, len(self.data))

        def link(new_offset: int) -> str:
            params = urlencode({"offset": new_offset, "limit": limit})
            return urlunsplit((parts.scheme, parts.netloc, parts.path, params, ""))

        previous = link(max(offset - limit, 0)) if offset > 0 else None
        next_url = link(end) if end < len(self.data) else None

        page = {
            "href": request.url,
            "limit": limit,
            "next": next_url,
            "offset": offset,
            "previous": previous,
            "total": len(self.data),
            "items": self.data[offset:end],
        }
        return HttpResponse(status=self.status, headers={}, body=json.dumps(page).encode())

    async def rest_async(self, request: HttpRequest) -> HttpResponse:
        return self.rest(request)

    @property
    def urls(self) -> list[str]:
        return [request.url for request in self.requests]


def query_pairs(url: str) -> list[tuple[str, str]]:
    """Decoded query pairs of ``url``, in order."""
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


@pytest.fixture
def single_client():
    """Factory for ``SingleTestClient``."""
    return SingleTestClient


@pytest.fixture
def paged_client():
    """Factory for ``PagedTestClient``."""
    return PagedTestClient


@pytest.fixture
def pairs():
    """Helper decoding a URL's query string into ordered pairs."""
    return query_pairs
