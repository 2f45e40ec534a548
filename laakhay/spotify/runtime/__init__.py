"""Runtime layer: transports and wire records."""

from .rest import (
    AsyncClient,
    Client,
    HTTPClient,
    HttpRequest,
    HttpResponse,
    RestClient,
    SyncHTTPClient,
)

__all__ = [
    "RestClient",
    "Client",
    "AsyncClient",
    "HttpRequest",
    "HttpResponse",
    "HTTPClient",
    "SyncHTTPClient",
]
