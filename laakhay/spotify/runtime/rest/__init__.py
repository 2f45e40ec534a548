"""REST runtime abstractions."""

from .client import AsyncClient, Client, RestClient
from .http_client import HTTPClient, retry_after_hook
from .models import HttpRequest, HttpResponse
from .sync_client import SyncHTTPClient

__all__ = [
    "RestClient",
    "Client",
    "AsyncClient",
    "HttpRequest",
    "HttpResponse",
    "HTTPClient",
    "SyncHTTPClient",
    "retry_after_hook",
]
