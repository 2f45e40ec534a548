"""Unit tests for the Endpoint contract and declare_endpoint."""

from dataclasses import dataclass, field

import pytest

from laakhay.spotify.api import Endpoint, Pageable, QueryParams, declare_endpoint
from laakhay.spotify.core import AlbumType, HttpMethod, Market, UrlBase


@declare_endpoint(HttpMethod.GET, "things/{id}/parts/{part}")
@dataclass(frozen=True)
class GetThingPart(Endpoint, Pageable):
    id: str
    part: str
    market: Market | None = None
    groups: list[AlbumType] | None = None
    include_external: bool | None = field(default=None, metadata={"param": "include_external_audio"})
    note: str | None = field(default=None, metadata={"param": None})


class TestDefaults:
    """Test Endpoint default implementations."""

    def test_defaults(self):
        @dataclass(frozen=True)
        class Minimal(Endpoint):
            def method(self):
                return HttpMethod.GET

            def path(self):
                return "minimal"

        endpoint = Minimal()
        assert endpoint.url_base() is UrlBase.API_V1
        assert endpoint.parameters() == QueryParams()
        assert endpoint.body() is None

    def test_abstract_methods_required(self):
        class Incomplete(Endpoint):
            pass

        with pytest.raises(TypeError):
            Incomplete()


class TestDeclareEndpoint:
    """Test generated endpoint methods."""

    def test_method_and_path(self):
        endpoint = GetThingPart(id="abc", part="x y/z")
        assert endpoint.method() is HttpMethod.GET
        assert endpoint.path() == "things/abc/parts/x%20y%2Fz"

    def test_parameters_in_field_order_skipping_none(self):
        endpoint = GetThingPart(
            id="abc",
            part="p",
            market=Market("us"),
            groups=[AlbumType.ALBUM, AlbumType.SINGLE],
            include_external=True,
            note="never sent",
        )
        assert endpoint.parameters().pairs == [
            ("market", "US"),
            ("groups", "album,single"),
            ("include_external_audio", "true"),
        ]

    def test_no_parameters(self):
        assert len(GetThingPart(id="abc", part="p").parameters()) == 0

    def test_class_is_concrete_and_pageable(self):
        assert isinstance(GetThingPart(id="a", part="b"), Pageable)
        assert not GetThingPart.__abstractmethods__

    def test_own_methods_are_kept(self):
        @declare_endpoint(HttpMethod.PUT, "custom")
        @dataclass(frozen=True)
        class Custom(Endpoint):
            value: int

            def parameters(self):
                return QueryParams().push("v", self.value * 2)

        endpoint = Custom(value=2)
        assert endpoint.method() is HttpMethod.PUT
        assert endpoint.parameters().pairs == [("v", "4")]

    def test_requires_dataclass(self):
        with pytest.raises(TypeError):

            @declare_endpoint(HttpMethod.GET, "x")
            class NotADataclass(Endpoint):
                pass

    def test_unknown_placeholder(self):
        with pytest.raises(ValueError):

            @declare_endpoint(HttpMethod.GET, "x/{missing}")
            @dataclass(frozen=True)
            class Broken(Endpoint):
                id: str
