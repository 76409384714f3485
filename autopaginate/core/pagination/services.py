from collections.abc import Mapping
from typing import Any

from autopaginate.core.pagination import helpers
from autopaginate.core.pagination.helpers import ItemTransform, Queryable
from autopaginate.core.pagination.schemas import PageResult, PaginatedResponse


class PaginationService:
    """
    Pagination helpers bound to a default page size.

    Handlers receive it through ``get_pagination_service`` and pass the request
    parameters explicitly; nothing here reads the current request on its own.
    """

    def __init__(self, default_per_page: int = helpers.DEFAULT_PER_PAGE) -> None:
        self.default_per_page = helpers.clamp_per_page(default_per_page)

    def clamp_per_page(self, requested: Any) -> int:
        return helpers.clamp_per_page(requested, self.default_per_page)

    def should_paginate(self, params: Mapping[str, Any]) -> bool:
        return helpers.should_paginate(params)

    async def apply_pagination(
        self,
        queryable: Queryable,
        params: Mapping[str, Any],
        *,
        path: str | None = None,
    ) -> PageResult:
        return await helpers.apply_pagination(
            queryable, params, self.default_per_page, path=path
        )

    def format_paginated_response(
        self, page_result: PageResult, item_transform: ItemTransform | None = None
    ) -> PaginatedResponse[Any]:
        return helpers.format_paginated_response(page_result, item_transform)

    async def build_index_response(
        self,
        queryable: Queryable,
        params: Mapping[str, Any],
        item_transform: ItemTransform | None = None,
        *,
        path: str | None = None,
    ) -> PaginatedResponse[Any] | list[Any]:
        """Paginated envelope or bare list, depending on the request parameters."""
        return await helpers.build_index_response(
            queryable,
            params,
            item_transform,
            self.default_per_page,
            path=path,
        )
