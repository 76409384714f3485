import os

import pytest

from autopaginate.main.config import Config, get_settings
from tests.fakes.db import FakeAsyncSession


@pytest.fixture(scope="session")
def settings() -> Config:
    os.environ.setdefault("TESTING", "true")
    get_settings.cache_clear()
    return get_settings()


@pytest.fixture
def items() -> list[dict[str, int]]:
    return [{"id": i} for i in range(1, 76)]


@pytest.fixture
def fake_session() -> FakeAsyncSession:
    return FakeAsyncSession()
