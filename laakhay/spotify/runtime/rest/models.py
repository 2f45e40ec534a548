"""Wire-level request and response records exchanged with transports."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...core.enums import HttpMethod


@dataclass
class HttpRequest:
    """A fully built request ready to be executed by a transport.

    Attributes:
        method: HTTP method
        url: Absolute URL including the query string
        headers: Headers to add (the transport may add its own, e.g. auth)
        body: Raw request body bytes (empty when the endpoint has no body)
    """

    method: HttpMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        return _lookup(self.headers, name)


@dataclass
class HttpResponse:
    """A raw response as returned by a transport."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        return _lookup(self.headers, name)


def _lookup(headers: dict[str, str], name: str) -> str | None:
    if name in headers:
        return headers[name]
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None
