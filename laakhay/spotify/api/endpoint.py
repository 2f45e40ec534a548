"""Endpoint contract.

Architecture:
    Every request type implements ``Endpoint``: an HTTP method, a fully
    substituted path, optional query parameters and an optional body. The
    dispatch engine (``api.dispatch``) only ever talks to this interface, so
    a new request type needs no dispatch code of its own.

Design Decisions:
    - Endpoints are plain immutable values, built per logical request
    - ``Pageable`` is a marker mixin; ``paged()`` refuses other endpoints
    - ``declare_endpoint`` generates the boilerplate for dataclass
      endpoints whose fields map one-to-one onto path placeholders and
      query parameters
"""

from __future__ import annotations

import dataclasses
import re
from abc import ABC, abstractmethod, update_abstractmethods
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from ..core.enums import HttpMethod, UrlBase
from .dispatch import query as _dispatch_query
from .dispatch import query_async as _dispatch_query_async
from .params import QueryParams, path_escaped, to_param_value

if TYPE_CHECKING:
    from ..runtime.rest.client import AsyncClient, Client

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")

E = TypeVar("E", bound="Endpoint")


class Endpoint(ABC):
    """A single logical request against the Web API."""

    @abstractmethod
    def method(self) -> HttpMethod:
        """The HTTP method to use for the endpoint."""
        pass

    @abstractmethod
    def path(self) -> str:
        """The path of the endpoint, relative to its URL base."""
        pass

    def url_base(self) -> UrlBase:
        """The URL base of the endpoint."""
        return UrlBase.API_V1

    def parameters(self) -> QueryParams:
        """Query parameters for the endpoint."""
        return QueryParams()

    def body(self) -> tuple[str, bytes] | None:
        """The body for the endpoint.

        Returns:
            ``(content_type, data)`` or None when the request has no body

        Raises:
            BodyError: If the body cannot be encoded
        """
        return None

    def query(self, client: Client, into: Any = Any) -> Any:
        """Dispatch the endpoint and deserialize the response into ``into``."""
        return _dispatch_query(self, client, into)

    async def query_async(self, client: AsyncClient, into: Any = Any) -> Any:
        """Asynchronous counterpart of ``query``."""
        return await _dispatch_query_async(self, client, into)


class Pageable:
    """Marker for endpoints returning offset-paginated ``Page`` objects."""

    pass


def declare_endpoint(method: HttpMethod | str, path: str) -> Callable[[type[E]], type[E]]:
    """Class decorator implementing ``Endpoint`` for a dataclass.

    ``{name}`` placeholders in ``path`` are filled from the fields of the
    same name (path-escaped). Every other field becomes a query parameter,
    in field order, skipped when None. A field's query key defaults to its
    name and can be overridden with ``metadata={"param": "key"}``; fields
    with ``metadata={"param": None}`` are not sent as parameters.

    Methods the class defines itself are left untouched.

    Example:
        @declare_endpoint(HttpMethod.GET, "albums/{id}/tracks")
        @dataclass(frozen=True)
        class GetAlbumTracks(Endpoint, Pageable):
            id: str
            market: Market | None = None
    """
    http_method = HttpMethod(method)
    placeholders = _PLACEHOLDER.findall(path)

    def decorator(cls: type[E]) -> type[E]:
        if not dataclasses.is_dataclass(cls):
            raise TypeError(f"{cls.__name__} must be a dataclass to use declare_endpoint")

        fields = dataclasses.fields(cls)
        names = {f.name for f in fields}
        missing = [name for name in placeholders if name not in names]
        if missing:
            raise ValueError(f"{cls.__name__} has no field(s) for path placeholder(s): {missing}")

        param_fields = [
            (f.name, f.metadata.get("param", f.name))
            for f in fields
            if f.name not in placeholders and f.metadata.get("param", f.name) is not None
        ]

        def _method(self: Any) -> HttpMethod:
            return http_method

        def _path(self: Any) -> str:
            values = {
                name: path_escaped(to_param_value(getattr(self, name))) for name in placeholders
            }
            return path.format(**values)

        def _parameters(self: Any) -> QueryParams:
            params = QueryParams()
            for attr, key in param_fields:
                params.push_opt(key, getattr(self, attr))
            return params

        generated = {"method": _method, "path": _path, "parameters": _parameters}
        for name, func in generated.items():
            if name not in cls.__dict__:
                func.__qualname__ = f"{cls.__qualname__}.{name}"
                setattr(cls, name, func)

        update_abstractmethods(cls)
        return cls

    return decorator
