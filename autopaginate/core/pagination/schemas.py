from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from math import ceil
from typing import Any, Generic, TypeVar
from urllib.parse import urlencode

from pydantic import ConfigDict, Field

from autopaginate.core.schemas import Base

T = TypeVar("T")


class PaginationMeta(Base):
    """Pagination block of a paginated response.

    ``first_item``/``last_item`` are serialized as ``from``/``to``.
    """

    model_config = ConfigDict(
        validate_by_name=True, validate_by_alias=True, serialize_by_alias=True
    )

    current_page: int
    last_page: int
    per_page: int
    total: int
    first_item: int | None = Field(alias="from")
    last_item: int | None = Field(alias="to")
    has_more: bool


class PaginatedResponse(Base, Generic[T]):
    """Generic paginated response envelope."""

    data: list[T]
    pagination: PaginationMeta


@dataclass(frozen=True, slots=True)
class PageResult:
    """One page window of a result set plus the request context it was built for."""

    items: list[Any]
    current_page: int
    last_page: int
    per_page: int
    total: int
    first_item: int | None
    last_item: int | None
    has_more_pages: bool
    path: str | None = None
    query: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        *,
        items: Sequence[Any],
        total: int,
        per_page: int,
        current_page: int,
        path: str | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> "PageResult":
        """Derive the page bounds from the total count and the page window."""
        items = list(items)
        last_page = max(ceil(total / per_page), 1)
        if items:
            first_item: int | None = (current_page - 1) * per_page + 1
            last_item: int | None = first_item + len(items) - 1
        else:
            first_item = last_item = None
        return cls(
            items=items,
            current_page=current_page,
            last_page=last_page,
            per_page=per_page,
            total=total,
            first_item=first_item,
            last_item=last_item,
            has_more_pages=current_page < last_page,
            path=path,
            query=dict(query or {}),
        )

    def url_for(self, page: int) -> str | None:
        """Link to ``page`` keeping every other query parameter of the request."""
        if self.path is None:
            return None
        query = {**self.query, "page": max(page, 1)}
        return f"{self.path}?{urlencode(query, doseq=True)}"

    @property
    def next_page_url(self) -> str | None:
        if not self.has_more_pages:
            return None
        return self.url_for(self.current_page + 1)

    @property
    def previous_page_url(self) -> str | None:
        if self.current_page <= 1:
            return None
        return self.url_for(self.current_page - 1)

    def to_meta(self) -> PaginationMeta:
        return PaginationMeta(
            current_page=self.current_page,
            last_page=self.last_page,
            per_page=self.per_page,
            total=self.total,
            first_item=self.first_item,
            last_item=self.last_item,
            has_more=self.has_more_pages,
        )
