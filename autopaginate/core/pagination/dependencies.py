from fastapi import Depends, Request
from starlette.datastructures import QueryParams

from autopaginate.core.pagination.services import PaginationService
from autopaginate.main.config import Config, get_settings


def get_request_params(request: Request) -> QueryParams:
    return request.query_params


def get_request_path(request: Request) -> str:
    """Request URL without its query string, used as the base of page links."""
    return str(request.url.replace(query="", fragment=""))


def get_pagination_service(
    settings: Config = Depends(get_settings),
) -> PaginationService:
    return PaginationService(
        default_per_page=settings.pagination.PAGINATION_DEFAULT_PER_PAGE
    )
