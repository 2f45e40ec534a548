"""Incremental page fetching.

Architecture:
    ``LazilyPagedState`` owns the traversal state of one paging session and
    turns it into one request per page. ``LazilyPagedIter`` buffers a single
    page and hands out items one at a time, both as a blocking iterator and
    as an asynchronous iterator. The eager mode in ``all_at_once`` simply
    drains the same iterator.

Design Decisions:
    - The first request is built from the endpoint (path, parameters,
      ``offset``, ``limit``); later requests reuse the server's ``next`` URL
      verbatim, because not every resource uses plain offset arithmetic
    - The cursor is only advanced after a page was decoded successfully
    - One page at a time: nothing is fetched before the buffer is drained
    - ``Limit(n)`` trims the page that crosses ``n``

Concurrency:
    A session is not safe to drive from several threads or tasks at once.
"""

from __future__ import annotations

import time
from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar
from urllib.parse import urlsplit

from ...core.exceptions import ApiError, UrlParseError
from ...models.misc import Page
from ...runtime.rest.models import HttpRequest, HttpResponse
from ..classify import checked_json, decode
from ..dispatch import build_request, send, send_async
from ..params import QueryParams
from ..telemetry import log_page_error, log_page_fetched
from .pagination import PaginationMode

if TYPE_CHECKING:
    from ...runtime.rest.client import AsyncClient, Client
    from .all_at_once import Paged

T = TypeVar("T")


class CursorKind(str, Enum):
    FIRST = "first"
    NEXT = "next"
    DONE = "done"


@dataclass(frozen=True)
class PageCursor:
    """Where the next page comes from.

    ``FIRST`` means no request was issued yet, ``NEXT`` carries the
    continuation URL supplied by the server and ``DONE`` is terminal.
    """

    kind: CursorKind
    url: str | None = None

    def __post_init__(self) -> None:
        if (self.kind == CursorKind.NEXT) != (self.url is not None):
            raise ValueError("only a NEXT cursor carries a URL")

    @classmethod
    def first(cls) -> PageCursor:
        return cls(CursorKind.FIRST)

    @classmethod
    def to(cls, url: str) -> PageCursor:
        return cls(CursorKind.NEXT, url)

    @classmethod
    def done(cls) -> PageCursor:
        return cls(CursorKind.DONE)

    @property
    def next_url(self) -> str | None:
        return self.url if self.kind == CursorKind.NEXT else None

    @property
    def is_done(self) -> bool:
        return self.kind == CursorKind.DONE


@dataclass
class PageState:
    """Mutable traversal state of one paging session."""

    offset: int = 0
    total: int = 0
    pages: int = 0
    cursor: PageCursor = field(default_factory=PageCursor.first)


def _absolute_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        raise UrlParseError(url)
    return url


class LazilyPagedState:
    """Turns a ``Paged`` description into page requests."""

    def __init__(self, paged: Paged) -> None:
        self.paged = paged
        self.state = PageState(offset=paged.pagination.initial_offset)

    @property
    def endpoint_name(self) -> str:
        return self.paged.endpoint.path()

    def page_url(self, client: Any) -> str | None:
        """URL of the next page, or None once the session is done.

        Raises:
            UrlParseError: If the client cannot resolve the endpoint
            UnsupportedUrlBaseError: If the endpoint's base is unknown
        """
        cursor = self.state.cursor
        if cursor.is_done:
            return None
        if cursor.next_url is not None:
            return cursor.next_url

        endpoint = self.paged.endpoint
        url = endpoint.url_base().endpoint_for(client, endpoint.path())
        url = endpoint.parameters().add_to_url(url)
        paging = QueryParams().push("offset", self.state.offset).push(
            "limit", self.paged.pagination.limit()
        )
        return paging.add_to_url(url)

    def build_request(self, url: str) -> HttpRequest:
        return build_request(self.paged.endpoint, url)

    def next_page(self, last_page_size: int, yielded: int, next_url: str | None) -> None:
        """Advance the cursor after a page was consumed."""
        state = self.state
        state.total += yielded
        state.pages += 1
        if self.paged.pagination.is_last_page(last_page_size, state.total):
            state.cursor = PageCursor.done()
        elif next_url is None:
            state.cursor = PageCursor.done()
        else:
            state.cursor = PageCursor.to(next_url)

    def process_response(self, response: HttpResponse, into: Any) -> list[Any]:
        """Classify and decode one page response, then advance the cursor.

        Raises:
            ApiError: If the response is an error or does not decode
        """
        value = checked_json(response)
        page = decode(value, Page[into])
        next_url = _absolute_url(page.next) if page.next is not None else None

        items = list(page.items)
        pagination = self.paged.pagination
        if pagination.mode == PaginationMode.LIMIT:
            remaining = max(pagination.count - self.state.total, 0)
            items = items[:remaining]

        self.next_page(len(page.items), len(items), next_url)
        return items

    def _failed(self, exc: ApiError) -> None:
        log_page_error(
            endpoint=self.endpoint_name,
            page_index=self.state.pages,
            error_type=type(exc).__name__,
            error_message=str(exc),
        )

    def _fetched(self, items: int, started: float) -> None:
        log_page_fetched(
            endpoint=self.endpoint_name,
            page_index=self.state.pages - 1,
            items=items,
            total_items=self.state.total,
            has_next=not self.state.cursor.is_done,
            latency_ms=(time.perf_counter() - started) * 1000,
        )

    def fetch(self, client: Client, into: Any = Any) -> list[Any]:
        """Fetch the next page with a blocking client. Empty once done."""
        started = time.perf_counter()
        try:
            url = self.page_url(client)
            if url is None:
                return []
            response = send(client, self.build_request(url))
            items = self.process_response(response, into)
        except ApiError as exc:
            self._failed(exc)
            raise
        self._fetched(len(items), started)
        return items

    async def fetch_async(self, client: AsyncClient, into: Any = Any) -> list[Any]:
        """Asynchronous counterpart of ``fetch``."""
        started = time.perf_counter()
        try:
            url = self.page_url(client)
            if url is None:
                return []
            response = await send_async(client, self.build_request(url))
            items = self.process_response(response, into)
        except ApiError as exc:
            self._failed(exc)
            raise
        self._fetched(len(items), started)
        return items


class LazilyPagedIter(Generic[T]):
    """Iterator over the items of a paginated resource.

    Pages are fetched on demand, so resources that do not use offset
    pagination may show duplicate or missing items if they change while
    iterating.

    Use ``for`` with a blocking ``Client`` and ``async for`` (or
    ``into_async()``) with an ``AsyncClient``. An ``ApiError`` raised while
    fetching a page propagates from ``__next__``/``__anext__``; the session
    stays on the failed page, so iterating again retries it.

    Example:
        >>> for track in paged_all(GetAlbumTracks(id="...")).iter(spotify, SimplifiedTrack):
        ...     print(track.name)
    """

    def __init__(self, paged: Paged, client: Any, into: Any = Any) -> None:
        self._client = client
        self._into = into
        self._state = LazilyPagedState(paged)
        self._current: list[T] = []

    @property
    def pages_fetched(self) -> int:
        return self._state.state.pages

    @property
    def items_yielded(self) -> int:
        return self._state.state.total - len(self._current)

    @property
    def cursor(self) -> PageCursor:
        return self._state.state.cursor

    def __iter__(self) -> LazilyPagedIter[T]:
        return self

    def __next__(self) -> T:
        if not self._current:
            self._current = self._state.fetch(self._client, self._into)
            self._current.reverse()
        if not self._current:
            raise StopIteration
        return self._current.pop()

    async def next_async(self) -> T:
        """Next item, fetching a page only when the buffer is empty.

        Raises:
            StopAsyncIteration: Once the session is exhausted
        """
        if not self._current:
            self._current = await self._state.fetch_async(self._client, self._into)
            self._current.reverse()
        if not self._current:
            raise StopAsyncIteration
        return self._current.pop()

    def __aiter__(self) -> LazilyPagedIter[T]:
        return self

    async def __anext__(self) -> T:
        return await self.next_async()

    async def into_async(self) -> AsyncIterator[T]:
        """Expose the iterator as an async generator of items."""
        async for item in self:
            yield item
