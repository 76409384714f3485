from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock


class FakeScalars:
    def __init__(self, items: list[Any]) -> None:
        self._items = items

    def all(self) -> list[Any]:
        return list(self._items)


class FakeResult:
    def __init__(
        self,
        *,
        items: list[Any] | None = None,
        scalar: int | None = None,
        rows: list[Any] | None = None,
    ) -> None:
        self._items = items or []
        self._scalar = scalar
        self._rows = rows if rows is not None else []
        self.unique_called = False

    def unique(self) -> FakeResult:
        self.unique_called = True
        return FakeResult(
            items=list(dict.fromkeys(self._items)),
            scalar=self._scalar,
            rows=list(dict.fromkeys(self._rows)),
        )

    def scalars(self) -> FakeScalars:
        return FakeScalars(self._items)

    def scalar_one(self) -> int | None:
        return self._scalar

    def all(self) -> list[Any]:
        return list(self._rows)


class FakeAsyncSession:
    def __init__(self, results: list[FakeResult] | None = None) -> None:
        self.execute = AsyncMock(side_effect=list(results or []))
        self.commit = AsyncMock()
        self.rollback = AsyncMock()
        self.add = MagicMock()

    def queue(self, *results: FakeResult | Exception) -> None:
        self.execute.side_effect = list(results)

    @property
    def statements(self) -> list[Any]:
        return [call.args[0] for call in self.execute.await_args_list]
