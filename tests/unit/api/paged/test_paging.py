"""Unit tests for eager and lazy paging against an in-memory paged source."""

import json
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from laakhay.spotify.api import (
    Endpoint,
    Pageable,
    Pagination,
    QueryParams,
    paged,
    paged_all,
    paged_with_limit,
    paged_with_limit_and_offset,
)
from laakhay.spotify.core import (
    ClientError,
    DataTypeError,
    HttpMethod,
    ServiceError,
    ServiceMessageError,
    UrlParseError,
)
from laakhay.spotify.runtime.rest import HttpResponse


@dataclass(frozen=True)
class Dummy(Endpoint, Pageable):
    market: str | None = None

    def method(self):
        return HttpMethod.GET

    def path(self):
        return "paged_dummy"

    def parameters(self):
        return QueryParams().push_opt("market", self.market)


@dataclass(frozen=True)
class NotPageable(Endpoint):
    def method(self):
        return HttpMethod.GET

    def path(self):
        return "single"


class DummyResult(BaseModel):
    value: int


def source(n):
    return [{"value": value} for value in range(n)]


def values(items):
    return [item.value for item in items]


def page_body(items, next_url=None):
    page = {
        "href": "https://api.spotify.com/v1/paged_dummy",
        "limit": 50,
        "next": next_url,
        "offset": 0,
        "previous": None,
        "total": len(items),
        "items": items,
    }
    return json.dumps(page).encode()


class TestEagerPaging:
    """Test Paged.query with every policy."""

    def test_all_collects_every_item_in_two_fetches(self, paged_client, pairs):
        client = paged_client(source(56))
        items = paged(Dummy(), Pagination.all()).query(client, DummyResult)
        assert values(items) == list(range(56))
        assert len(client.requests) == 2
        assert pairs(client.urls[0]) == [("offset", "0"), ("limit", "50")]
        assert pairs(client.urls[1]) == [("offset", "50"), ("limit", "50")]

    def test_limit_returns_first_items(self, paged_client):
        client = paged_client(source(256))
        items = paged_with_limit(Dummy(), 3).query(client, DummyResult)
        assert values(items) == [0, 1, 2]
        assert len(client.requests) == 1

    def test_page_window(self, paged_client, pairs):
        client = paged_client(source(256))
        items = paged_with_limit_and_offset(Dummy(), 5, 15).query(client, DummyResult)
        assert values(items) == [15, 16, 17, 18, 19]
        assert pairs(client.urls[0]) == [("offset", "15"), ("limit", "5")]

    def test_limit_above_max_keeps_fetching(self, paged_client):
        client = paged_client(source(256))
        items = paged_with_limit(Dummy(), 60).query(client, DummyResult)
        assert values(items) == list(range(60))
        assert len(client.requests) == 2

    def test_limit_above_source_size(self, paged_client):
        client = paged_client(source(100))
        items = paged_with_limit(Dummy(), 120).query(client, DummyResult)
        assert values(items) == list(range(100))
        assert len(client.requests) == 2

    def test_exact_multiple_of_page_size(self, paged_client):
        client = paged_client(source(100))
        assert len(paged_all(Dummy()).query(client, DummyResult)) == 100
        assert len(client.requests) == 2

    def test_empty_source(self, paged_client):
        client = paged_client([])
        assert paged_all(Dummy()).query(client, DummyResult) == []
        assert len(client.requests) == 1

    def test_default_policy_is_all(self, paged_client):
        client = paged_client(source(7))
        assert paged(Dummy()).pagination == Pagination.all()
        assert len(paged(Dummy()).query(client)) == 7

    def test_raw_items_without_type(self, paged_client):
        client = paged_client(source(2))
        assert paged_all(Dummy()).query(client) == [{"value": 0}, {"value": 1}]

    def test_endpoint_parameters_precede_paging_parameters(self, paged_client, pairs):
        client = paged_client(source(3))
        paged_all(Dummy(market="US")).query(client)
        assert pairs(client.urls[0]) == [("market", "US"), ("offset", "0"), ("limit", "50")]

    def test_non_json_response(self, single_client):
        client = single_client(b"not json")
        with pytest.raises(ServiceError) as exc_info:
            paged_all(Dummy()).query(client, DummyResult)
        assert exc_info.value.status_code == 200

    def test_error_status(self, single_client):
        client = single_client(b'{"message": "Invalid limit"}', status=400)
        with pytest.raises(ServiceMessageError):
            paged_all(Dummy()).query(client)

    def test_items_of_wrong_shape(self, paged_client):
        client = paged_client([{"other": 1}])
        with pytest.raises(DataTypeError) as exc_info:
            paged_all(Dummy()).query(client, DummyResult)
        assert "DummyResult" in exc_info.value.typename

    def test_error_on_later_page_aborts(self, paged_client):
        client = paged_client(source(80))
        original = client.rest

        def rest(request):
            if client.requests:
                raise ConnectionError("dropped")
            return original(request)

        client.rest = rest
        with pytest.raises(ClientError):
            paged_all(Dummy()).query(client, DummyResult)

    def test_non_pageable_endpoint_rejected(self):
        with pytest.raises(TypeError):
            paged(NotPageable())


class TestNextUrl:
    """Test that server-supplied continuation URLs are used verbatim."""

    def test_next_url_used_verbatim(self, single_client):
        next_url = "https://api.spotify.com/v1/paged_dummy?after=cursor-token&limit=50"
        client = single_client()
        responses = [
            HttpResponse(200, {}, page_body(source(50), next_url)),
            HttpResponse(200, {}, page_body(source(2))),
        ]

        def rest(request):
            client.requests.append(request)
            return responses.pop(0)

        client.rest = rest
        items = paged_all(Dummy()).query(client, DummyResult)
        assert len(items) == 52
        assert client.requests[1].url == next_url

    def test_relative_next_url_is_rejected(self, single_client):
        client = single_client(page_body(source(50), "/v1/paged_dummy?offset=50"))
        with pytest.raises(UrlParseError):
            paged_all(Dummy()).query(client, DummyResult)

    def test_full_page_without_next_url_stops(self, single_client):
        client = single_client(page_body(source(50)))
        assert len(paged_all(Dummy()).query(client)) == 50
        assert len(client.requests) == 1


class TestLazyPaging:
    """Test LazilyPagedIter."""

    def test_pages_fetched_on_demand(self, paged_client):
        client = paged_client(source(120))
        iterator = paged_all(Dummy()).iter(client, DummyResult)
        assert client.requests == []

        first = next(iterator)
        assert first.value == 0
        assert len(client.requests) == 1

        for _ in range(49):
            next(iterator)
        assert len(client.requests) == 1

        assert next(iterator).value == 50
        assert len(client.requests) == 2

    def test_iteration_yields_everything_in_order(self, paged_client):
        client = paged_client(source(75))
        assert values(paged_all(Dummy()).iter(client, DummyResult)) == list(range(75))

    def test_exhausted_iterator_stays_exhausted(self, paged_client):
        client = paged_client(source(3))
        iterator = paged_all(Dummy()).iter(client)
        assert len(list(iterator)) == 3
        assert list(iterator) == []
        assert len(client.requests) == 1
        assert iterator.cursor.is_done

    def test_each_iter_starts_a_new_session(self, paged_client):
        client = paged_client(source(3))
        session = paged_all(Dummy())
        assert len(list(session.iter(client))) == 3
        assert len(list(session.iter(client))) == 3

    def test_failed_page_can_be_retried(self, paged_client):
        client = paged_client(source(60))
        original = client.rest
        failures = [ConnectionError("flaky")]

        def rest(request):
            if len(client.requests) == 1 and failures:
                raise failures.pop()
            return original(request)

        client.rest = rest
        iterator = paged_all(Dummy()).iter(client, DummyResult)
        collected = [next(iterator) for _ in range(50)]

        with pytest.raises(ClientError):
            next(iterator)

        collected.extend(iterator)
        assert values(collected) == list(range(60))


class TestAsyncPaging:
    """Test the asynchronous paging shapes."""

    @pytest.mark.asyncio
    async def test_query_async(self, paged_client):
        client = paged_client(source(56))
        items = await paged_all(Dummy()).query_async(client, DummyResult)
        assert values(items) == list(range(56))
        assert len(client.requests) == 2

    @pytest.mark.asyncio
    async def test_async_for(self, paged_client):
        client = paged_client(source(256))
        collected = []
        async for item in paged_with_limit_and_offset(Dummy(), 5, 15).iter(client, DummyResult):
            collected.append(item)
        assert values(collected) == [15, 16, 17, 18, 19]

    @pytest.mark.asyncio
    async def test_into_async_does_not_prefetch(self, paged_client):
        client = paged_client(source(120))
        stream = paged_all(Dummy()).iter(client, DummyResult).into_async()
        assert client.requests == []

        first = await stream.__anext__()
        assert first.value == 0
        assert len(client.requests) == 1

        rest = [item async for item in stream]
        assert values(rest) == list(range(1, 120))
        assert len(client.requests) == 3

    @pytest.mark.asyncio
    async def test_async_error(self, single_client):
        client = single_client(b"not json")
        with pytest.raises(ServiceError):
            await paged_with_limit(Dummy(), 3).query_async(client)
