"""Offset pagination.

Architecture:
    ``Pagination`` decides how many items a session collects and when it
    stops, ``lazy`` fetches one page at a time, and ``Paged`` wires an
    endpoint to a policy and offers the eager (``query``) and lazy
    (``iter``) modes.
"""

from .all_at_once import Paged, paged, paged_all, paged_with_limit, paged_with_limit_and_offset
from .lazy import CursorKind, LazilyPagedIter, LazilyPagedState, PageCursor, PageState
from .pagination import MAX_LIMIT, Pagination, PaginationMode

__all__ = [
    "MAX_LIMIT",
    "CursorKind",
    "LazilyPagedIter",
    "LazilyPagedState",
    "PageCursor",
    "PageState",
    "Paged",
    "Pagination",
    "PaginationMode",
    "paged",
    "paged_all",
    "paged_with_limit",
    "paged_with_limit_and_offset",
]
