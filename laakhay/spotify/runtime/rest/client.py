"""Transport contract implemented by callers.

The dispatch and pagination engines never open sockets themselves. They
ask a transport to resolve endpoint paths (``RestClient``) and to execute
fully built requests, either blocking (``Client``) or awaitable
(``AsyncClient``). The two execution halves are independent, so a type may
implement only one of them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import HttpRequest, HttpResponse


class RestClient(ABC):
    """A client which can resolve REST endpoints against its base URL."""

    @abstractmethod
    def rest_endpoint(self, endpoint: str) -> str:
        """Get the absolute URL for a REST endpoint path.

        Raises:
            UrlParseError: If the endpoint cannot be resolved
        """
        pass


class Client(RestClient):
    """A client which can execute REST requests synchronously."""

    @abstractmethod
    def rest(self, request: HttpRequest) -> HttpResponse:
        """Send a request and return the raw response.

        Any exception raised here that is not already an ``ApiError`` is
        wrapped into ``ClientError`` by the dispatch engine.
        """
        pass


class AsyncClient(RestClient):
    """A client which can execute REST requests asynchronously."""

    @abstractmethod
    async def rest_async(self, request: HttpRequest) -> HttpResponse:
        """Send a request asynchronously and return the raw response."""
        pass
