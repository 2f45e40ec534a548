"""Pagination policies.

Pure value types: the mutable traversal state of a paging session lives in
``lazy.PageState``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ...config import MAX_PAGE_LIMIT

MAX_LIMIT = MAX_PAGE_LIMIT


class PaginationMode(str, Enum):
    """How many items a paging session collects."""

    ALL = "all"
    LIMIT = "limit"
    PAGE = "page"


@dataclass(frozen=True)
class Pagination:
    """Pagination policy for a paged endpoint.

    Use the constructors rather than the fields:

        Pagination.all()               # every item, MAX_LIMIT per request
        Pagination.with_limit(120)     # at most 120 items
        Pagination.page(5, offset=15)  # one window of 5 items at offset 15

    Attributes:
        mode: Policy variant
        count: Item limit for ``LIMIT`` and ``PAGE``, None for ``ALL``
        offset: Starting offset, only non-zero for ``PAGE``
    """

    mode: PaginationMode = PaginationMode.ALL
    count: int | None = None
    offset: int = 0

    def __post_init__(self) -> None:
        if self.mode == PaginationMode.ALL:
            if self.count is not None or self.offset:
                raise ValueError("Pagination.all() takes no limit or offset")
            return
        if self.count is None or self.count < 0:
            raise ValueError(f"limit must be a non-negative integer, got {self.count!r}")
        if self.offset < 0:
            raise ValueError(f"offset must be a non-negative integer, got {self.offset!r}")
        if self.mode == PaginationMode.LIMIT and self.offset:
            raise ValueError("Pagination.with_limit() takes no offset")

    @classmethod
    def all(cls) -> Pagination:
        return cls(PaginationMode.ALL)

    @classmethod
    def with_limit(cls, limit: int) -> Pagination:
        return cls(PaginationMode.LIMIT, limit)

    @classmethod
    def page(cls, limit: int, offset: int = 0) -> Pagination:
        return cls(PaginationMode.PAGE, limit, offset)

    @property
    def initial_offset(self) -> int:
        return self.offset if self.mode == PaginationMode.PAGE else 0

    def limit(self) -> int:
        """Effective page size sent with every self-computed request."""
        if self.count is None:
            return MAX_LIMIT
        return min(self.count, MAX_LIMIT)

    def is_last_page(self, last_page_size: int, num_results: int) -> bool:
        """Decide whether the page just fetched ends the session.

        Args:
            last_page_size: Number of items the server returned for the page
            num_results: Items accumulated so far in the session
        """
        if last_page_size < self.limit():
            return True
        if self.mode == PaginationMode.LIMIT:
            return self.count <= num_results
        if self.mode == PaginationMode.PAGE:
            return self.offset + self.count >= num_results
        return False

    def __str__(self) -> str:
        if self.mode == PaginationMode.ALL:
            return "All"
        if self.mode == PaginationMode.LIMIT:
            return f"Limit({self.count})"
        return f"Page(limit={self.count}, offset={self.offset})"
