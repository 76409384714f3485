"""Pagination helpers, schemas and dependencies for list endpoints."""

from .helpers import (
    DEFAULT_PER_PAGE,
    MAX_PER_PAGE,
    apply_pagination,
    build_index_response,
    clamp_per_page,
    format_paginated_response,
    resolve_page,
    should_paginate,
)
from .schemas import PageResult, PaginatedResponse, PaginationMeta
from .services import PaginationService
from .sources import DeferredSource, SelectSource

__all__ = [
    "DEFAULT_PER_PAGE",
    "MAX_PER_PAGE",
    "DeferredSource",
    "PageResult",
    "PaginatedResponse",
    "PaginationMeta",
    "PaginationService",
    "SelectSource",
    "apply_pagination",
    "build_index_response",
    "clamp_per_page",
    "format_paginated_response",
    "resolve_page",
    "should_paginate",
]
