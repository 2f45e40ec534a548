"""Dispatch an endpoint while discarding a successful response body."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .dispatch import query_ignore, query_ignore_async

if TYPE_CHECKING:
    from ..runtime.rest.client import AsyncClient, Client
    from .endpoint import Endpoint


@dataclass(frozen=True)
class Ignore:
    """Wraps an endpoint so that a successful response is not parsed.

    Errors are still classified: a non-success status parses the body to
    build the same error the typed path would raise.
    """

    endpoint: Endpoint

    def query(self, client: Client) -> None:
        query_ignore(self.endpoint, client)

    async def query_async(self, client: AsyncClient) -> None:
        await query_ignore_async(self.endpoint, client)


def ignore(endpoint: Endpoint) -> Ignore:
    """Wrap ``endpoint`` so its successful response body is ignored."""
    return Ignore(endpoint)
