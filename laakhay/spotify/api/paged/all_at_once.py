"""Paging sessions and eager collection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..endpoint import Endpoint, Pageable
from ..telemetry import log_paging_complete
from .lazy import LazilyPagedIter
from .pagination import Pagination

if TYPE_CHECKING:
    from ...runtime.rest.client import AsyncClient, Client


@dataclass(frozen=True)
class Paged:
    """A pageable endpoint together with its pagination policy.

    ``Paged`` is a description only; every ``iter``/``query`` call starts a
    fresh session from the first page.
    """

    endpoint: Endpoint
    pagination: Pagination = field(default_factory=Pagination.all)

    def __post_init__(self) -> None:
        if not isinstance(self.endpoint, Pageable):
            raise TypeError(f"{type(self.endpoint).__name__} is not a pageable endpoint")

    def iter(self, client: Any, into: Any = Any) -> LazilyPagedIter:
        """Lazily iterate over the items, one page at a time."""
        return LazilyPagedIter(self, client, into)

    def query(self, client: Client, into: Any = Any) -> list[Any]:
        """Collect every item the pagination policy allows.

        Raises:
            ApiError: The first page error; no partial result is returned
        """
        iterator = self.iter(client, into)
        items = list(iterator)
        log_paging_complete(
            endpoint=self.endpoint.path(), pages=iterator.pages_fetched, total_items=len(items)
        )
        return items

    async def query_async(self, client: AsyncClient, into: Any = Any) -> list[Any]:
        """Asynchronous counterpart of ``query``."""
        iterator = self.iter(client, into)
        items = [item async for item in iterator]
        log_paging_complete(
            endpoint=self.endpoint.path(), pages=iterator.pages_fetched, total_items=len(items)
        )
        return items


def paged(endpoint: Endpoint, pagination: Pagination | None = None) -> Paged:
    """Page through ``endpoint`` with ``pagination`` (all items by default).

    Raises:
        TypeError: If the endpoint is not ``Pageable``
    """
    return Paged(endpoint, pagination if pagination is not None else Pagination.all())


def paged_all(endpoint: Endpoint) -> Paged:
    """Collect all data from a paged endpoint."""
    return paged(endpoint, Pagination.all())


def paged_with_limit(endpoint: Endpoint, limit: int) -> Paged:
    """Collect at most ``limit`` items from a paged endpoint."""
    return paged(endpoint, Pagination.with_limit(limit))


def paged_with_limit_and_offset(endpoint: Endpoint, limit: int, offset: int) -> Paged:
    """Collect a single window of ``limit`` items starting at ``offset``."""
    return paged(endpoint, Pagination.page(limit, offset))
