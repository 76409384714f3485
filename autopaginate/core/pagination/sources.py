from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from sqlalchemy import Select, func, select
from sqlalchemy.engine import Result
from sqlalchemy.ext.asyncio import AsyncSession

from autopaginate.core.pagination.schemas import PageResult
from autopaginate.loggers import get_logger

logger = get_logger(__name__)


@runtime_checkable
class DeferredSource(Protocol):
    """A query that is only executed when a page or the full result is requested."""

    async def paginate(self, per_page: int, page: int) -> PageResult: ...

    async def get(self) -> Sequence[Any]: ...


class SelectSource:
    """Deferred source over a SQLAlchemy ``Select`` executed on an ``AsyncSession``.

    The statement's own ORDER BY decides the page windows; without one the
    database is free to return rows in any order.

    Rows are de-duplicated only when the statement selects ORM entities
    (joined eager loads repeat the parent row); column selects keep every row
    so pages stay aligned with the count. Pass ``unique`` to force either way.
    """

    def __init__(
        self,
        session: AsyncSession,
        statement: Select[Any],
        scalars: bool = True,
        unique: bool | None = None,
    ) -> None:
        self.session = session
        self.statement = statement
        self.scalars = scalars
        self.unique = self._selects_entities() if unique is None else unique

    def _selects_entities(self) -> bool:
        return any(
            description.get("entity") is not None
            and description.get("expr") is description.get("entity")
            for description in self.statement.column_descriptions
        )

    async def count(self) -> int:
        """Count rows matching the statement, ignoring its ordering."""
        count_query = select(func.count()).select_from(
            self.statement.order_by(None).subquery()
        )
        result = await self.session.execute(count_query)
        return int(result.scalar_one())

    async def ordered_slice(self, offset: int, limit: int) -> list[Any]:
        result = await self.session.execute(self.statement.offset(offset).limit(limit))
        return self._rows(result)

    async def get(self) -> list[Any]:
        """Execute the statement without pagination."""
        result = await self.session.execute(self.statement)
        return self._rows(result)

    async def paginate(self, per_page: int, page: int) -> PageResult:
        """Retrieve one page window using limit/offset pagination."""
        if page < 1:
            raise ValueError("page must be greater than or equal to 1")
        if per_page < 1:
            raise ValueError("per_page must be greater than or equal to 1")

        total = await self.count()
        items: list[Any] = []
        if total:
            items = await self.ordered_slice((page - 1) * per_page, per_page)
        logger.debug(
            "Paginated query: page=%s per_page=%s total=%s fetched=%s",
            page,
            per_page,
            total,
            len(items),
        )
        return PageResult.build(
            items=items, total=total, per_page=per_page, current_page=page
        )

    def _rows(self, result: Result[Any]) -> list[Any]:
        if self.unique:
            result = result.unique()
        if self.scalars:
            return list(result.scalars().all())
        return list(result.all())
