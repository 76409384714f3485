"""Pagination decision, page windows and response shaping for list endpoints.

Query parameters understood:

- ``page``: page number starting from 1
- ``per_page``: page size, clamped to 1..100
- ``paginate``: the exact string ``"false"`` turns pagination off
"""

from collections.abc import Callable, Mapping, Sequence
import dataclasses
import re
from typing import Any, TypeAlias

from pydantic import BaseModel

from autopaginate.core.errors.exceptions import InvalidInputException
from autopaginate.core.pagination.schemas import (
    PageResult,
    PaginatedResponse,
)
from autopaginate.core.pagination.sources import DeferredSource
from autopaginate.loggers import get_logger

logger = get_logger(__name__)

DEFAULT_PER_PAGE = 15
MIN_PER_PAGE = 1
MAX_PER_PAGE = 100

# Plain ASCII integers only, no digit separators or other scripts
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

ItemTransform: TypeAlias = Callable[[Any], Any] | type[BaseModel]
Queryable: TypeAlias = DeferredSource | Sequence[Any]


def _coerce_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if INTEGER_PATTERN.fullmatch(text):
            return int(text)
        return None
    return None


def clamp_per_page(requested: Any, default: int = DEFAULT_PER_PAGE) -> int:
    """Page size as an int within 1..100; absent or unparsable values use ``default``."""
    per_page = _coerce_int(requested)
    if per_page is None:
        per_page = default
    return min(max(per_page, MIN_PER_PAGE), MAX_PER_PAGE)


def resolve_page(requested: Any) -> int:
    page = _coerce_int(requested)
    if page is None or page < 1:
        return 1
    return page


def should_paginate(params: Mapping[str, Any]) -> bool:
    """
    Decide whether the request asked for a paginated response.

    ``paginate=false`` wins over everything else and is compared as a string,
    so ``paginate=0`` or ``paginate=False`` do not disable pagination.
    Otherwise pagination is opt-in through ``page`` or ``per_page``.
    """
    if "paginate" in params and params["paginate"] == "false":
        return False
    return "page" in params or "per_page" in params


def is_materialized(queryable: Any) -> bool:
    return isinstance(queryable, Sequence) and not isinstance(
        queryable, (str, bytes, bytearray)
    )


def _invalid_queryable(queryable: Any) -> InvalidInputException:
    return InvalidInputException(
        "Query must be a deferred source or a sequence",
        additional_info={"type": type(queryable).__name__},
    )


async def apply_pagination(
    queryable: Queryable,
    params: Mapping[str, Any],
    default_per_page: int = DEFAULT_PER_PAGE,
    *,
    path: str | None = None,
) -> PageResult:
    """Cut the requested page window out of ``queryable``.

    Deferred sources count and slice on their own side; sequences are sliced
    in memory. A page past the end yields an empty window.
    """
    per_page = clamp_per_page(params.get("per_page"), default_per_page)
    page = resolve_page(params.get("page"))
    query = dict(params)

    if isinstance(queryable, DeferredSource):
        result = await queryable.paginate(per_page, page)
        if result.path is None and not result.query:
            result = dataclasses.replace(result, path=path, query=query)
        return result

    if is_materialized(queryable):
        offset = (page - 1) * per_page
        logger.debug(
            "Paginating sequence: page=%s per_page=%s total=%s",
            page,
            per_page,
            len(queryable),
        )
        return PageResult.build(
            items=queryable[offset : offset + per_page],
            total=len(queryable),
            per_page=per_page,
            current_page=page,
            path=path,
            query=query,
        )

    raise _invalid_queryable(queryable)


def transform_items(
    items: Sequence[Any], item_transform: ItemTransform | None = None
) -> list[Any]:
    if item_transform is None:
        return list(items)
    if isinstance(item_transform, type) and issubclass(item_transform, BaseModel):
        return [
            item
            if isinstance(item, item_transform)
            else item_transform.model_validate(item)
            for item in items
        ]
    return [item_transform(item) for item in items]


def format_paginated_response(
    page_result: PageResult, item_transform: ItemTransform | None = None
) -> PaginatedResponse[Any]:
    return PaginatedResponse(
        data=transform_items(page_result.items, item_transform),
        pagination=page_result.to_meta(),
    )


async def build_index_response(
    queryable: Queryable,
    params: Mapping[str, Any],
    item_transform: ItemTransform | None = None,
    default_per_page: int = DEFAULT_PER_PAGE,
    *,
    path: str | None = None,
) -> PaginatedResponse[Any] | list[Any]:
    """
    Paginated envelope when the request opted in, otherwise the bare item list.

    Args:
        queryable: Deferred source or in-memory sequence
        params: Request query parameters
        item_transform: Callable or pydantic model applied to every item
        default_per_page: Page size used when ``per_page`` is absent or invalid
        path: Request URL without query string, kept for navigation links

    Returns:
        PaginatedResponse when paginating, a plain list otherwise
    """
    if should_paginate(params):
        page_result = await apply_pagination(
            queryable, params, default_per_page, path=path
        )
        return format_paginated_response(page_result, item_transform)

    if isinstance(queryable, DeferredSource):
        items = await queryable.get()
    elif is_materialized(queryable):
        items = queryable
    else:
        raise _invalid_queryable(queryable)

    logger.debug("Returning %s items without pagination", len(items))
    return transform_items(items, item_transform)
