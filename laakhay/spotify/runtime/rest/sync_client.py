"""httpx-backed synchronous HTTP client."""

from __future__ import annotations

import logging
import time

import httpx

from ...config import DEFAULT_TIMEOUT, USER_AGENT
from ...core.exceptions import ClientError
from .http_client import ResponseHook
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class SyncHTTPClient:
    """Synchronous httpx client wrapper.

    Mirrors ``HTTPClient`` (response hooks, throttle window) for code that
    runs without an event loop.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        follow_redirects: bool = True,
        user_agent: str = USER_AGENT,
        client: httpx.Client | None = None,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._client = client or httpx.Client(follow_redirects=follow_redirects, timeout=timeout)
        self._response_hooks: list[ResponseHook] = []
        self._throttle_until: float | None = None

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._response_hooks.append(hook)

    def set_throttle(self, delay: float) -> None:
        if delay <= 0:
            return
        until = time.time() + delay
        if self._throttle_until is None or until > self._throttle_until:
            self._throttle_until = until

    def _wait_for_throttle(self) -> None:
        if self._throttle_until is None:
            return
        remaining = self._throttle_until - time.time()
        if remaining > 0:
            logger.debug("throttle_wait", extra={"delay_s": remaining})
            time.sleep(remaining)
        self._throttle_until = None

    def send(self, request: HttpRequest) -> HttpResponse:
        """Execute a request and read the whole response body.

        Raises:
            ClientError: On any httpx transport failure
        """
        self._wait_for_throttle()

        headers = dict(request.headers)
        headers.setdefault("User-Agent", self.user_agent)

        try:
            resp = self._client.request(
                request.method.value,
                request.url,
                headers=headers,
                content=request.body or None,
            )
        except httpx.HTTPError as exc:
            raise ClientError(exc) from exc

        for hook in self._response_hooks:
            delay = hook(resp)
            if delay:
                self.set_throttle(float(delay))

        return HttpResponse(
            status=resp.status_code,
            headers=dict(resp.headers),
            body=resp.content,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> SyncHTTPClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
