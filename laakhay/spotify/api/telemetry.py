"""Structured logging for dispatch and pagination.

This module provides telemetry hooks emitting event-style log records with
structured ``extra`` fields. The library never configures handlers.
"""

from __future__ import annotations

import logging

from ..runtime.rest.models import HttpRequest

logger = logging.getLogger(__name__)


def log_request_dispatched(*, request: HttpRequest, endpoint: str) -> None:
    """Log a request handed to the transport."""
    logger.debug(
        "request_dispatched",
        extra={
            "endpoint": endpoint,
            "method": request.method.value,
            "url": request.url,
            "body_bytes": len(request.body),
        },
    )


def log_response_error(*, endpoint: str, status: int, error_type: str) -> None:
    """Log a response that was classified as an error."""
    logger.debug(
        "response_error",
        extra={"endpoint": endpoint, "status": status, "error_type": error_type},
    )


def log_page_fetched(
    *,
    endpoint: str,
    page_index: int,
    items: int,
    total_items: int,
    has_next: bool,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single page fetch.

    Args:
        endpoint: Endpoint path
        page_index: Zero-based index of the page within the session
        items: Items yielded from this page
        total_items: Items yielded so far in the session
        has_next: Whether another page will be requested
        latency_ms: Latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            "endpoint": endpoint,
            "page_index": page_index,
            "items": items,
            "total_items": total_items,
            "has_next": has_next,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(*, endpoint: str, page_index: int, error_type: str, error_message: str) -> None:
    """Log a page fetch error. The error is still raised to the caller."""
    logger.error(
        "page_error",
        extra={
            "endpoint": endpoint,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_paging_complete(*, endpoint: str, pages: int, total_items: int) -> None:
    """Log the end of an eager paging session."""
    logger.info(
        "paging_complete",
        extra={"endpoint": endpoint, "pages": pages, "total_items": total_items},
    )
