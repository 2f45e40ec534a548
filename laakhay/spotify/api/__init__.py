"""Endpoint dispatch and pagination.

Architecture:
    ``Endpoint`` describes one request, ``dispatch`` executes it through a
    caller-supplied transport, ``classify`` turns raw responses into values
    or errors, ``ignore`` and ``paged`` wrap endpoints for the ignore and
    paging paths.
"""

from .classify import check_status, checked_json, classify, decode, error_from_payload
from .dispatch import build_request, endpoint_url
from .endpoint import Endpoint, Pageable, declare_endpoint
from .ignore import Ignore, ignore
from .paged import (
    MAX_LIMIT,
    LazilyPagedIter,
    PageCursor,
    Paged,
    Pagination,
    PaginationMode,
    paged,
    paged_all,
    paged_with_limit,
    paged_with_limit_and_offset,
)
from .params import (
    FORM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    FormParams,
    JsonParams,
    QueryParams,
    path_escaped,
    to_param_value,
)

__all__ = [
    "Endpoint",
    "Pageable",
    "declare_endpoint",
    "build_request",
    "endpoint_url",
    "check_status",
    "checked_json",
    "classify",
    "decode",
    "error_from_payload",
    "Ignore",
    "ignore",
    "MAX_LIMIT",
    "LazilyPagedIter",
    "PageCursor",
    "Paged",
    "Pagination",
    "PaginationMode",
    "paged",
    "paged_all",
    "paged_with_limit",
    "paged_with_limit_and_offset",
    "FORM_CONTENT_TYPE",
    "JSON_CONTENT_TYPE",
    "FormParams",
    "JsonParams",
    "QueryParams",
    "path_escaped",
    "to_param_value",
]
