"""Async HTTP client helper backed by aiohttp."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from typing import Any

import aiohttp

from ...config import DEFAULT_TIMEOUT, USER_AGENT
from ...core.exceptions import ClientError
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

# A hook sees every raw response and may return a delay (seconds) to wait
# before the next request is sent.
ResponseHook = Callable[[Any], "float | None"]


class HTTPClient:
    """Async HTTP client wrapper.

    Owns a lazily created ``aiohttp.ClientSession``. Response hooks can ask
    for a throttle window that delays the next request; nothing is retried.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        follow_redirects: bool = True,
        user_agent: str = USER_AGENT,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.follow_redirects = follow_redirects
        self.user_agent = user_agent
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []
        self._throttle_until: float | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a hook called with every raw response."""
        self._response_hooks.append(hook)

    def set_throttle(self, delay: float) -> None:
        """Delay the next request by ``delay`` seconds.

        A shorter window never shortens one that is already in place.
        """
        if delay <= 0:
            return
        until = time.time() + delay
        if self._throttle_until is None or until > self._throttle_until:
            self._throttle_until = until

    async def _wait_for_throttle(self) -> None:
        if self._throttle_until is None:
            return
        remaining = self._throttle_until - time.time()
        if remaining > 0:
            logger.debug("throttle_wait", extra={"delay_s": remaining})
            await asyncio.sleep(remaining)
        self._throttle_until = None

    def _run_hooks(self, response: Any) -> None:
        for hook in self._response_hooks:
            delay = hook(response)
            if delay:
                self.set_throttle(float(delay))

    async def send(self, request: HttpRequest) -> HttpResponse:
        """Execute a request and read the whole response body.

        Raises:
            ClientError: On connection failures and timeouts
        """
        await self._wait_for_throttle()

        headers = dict(request.headers)
        headers.setdefault("User-Agent", self.user_agent)

        try:
            async with self.session.request(
                request.method.value,
                request.url,
                headers=headers,
                data=request.body or None,
                allow_redirects=self.follow_redirects,
            ) as response:
                body = await response.read()
                self._run_hooks(response)
                return HttpResponse(
                    status=response.status,
                    headers={key: value for key, value in response.headers.items()},
                    body=body,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise ClientError(exc) from exc

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def retry_after_hook(response: Any) -> float | None:
    """Response hook honouring ``Retry-After`` on HTTP 429.

    The rate-limited request itself still fails; the hook only delays the
    request that follows it.
    """
    # aiohttp exposes `status`, httpx `status_code`
    status = getattr(response, "status", None) or getattr(response, "status_code", None)
    if status != 429:
        return None
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None
