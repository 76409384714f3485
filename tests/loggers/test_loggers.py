import logging
from pathlib import Path

import pytest

from autopaginate import loggers


@pytest.mark.parametrize(
    "name,expected",
    [
        ("DEBUG", logging.DEBUG),
        ("warn", logging.WARNING),
        (" Warning ", logging.WARNING),
        ("NOTSET", logging.NOTSET),
        ("loud", logging.INFO),
        ("BASIC_FORMAT", logging.INFO),
    ],
)
def test_resolve_log_level(name: str, expected: int) -> None:
    assert loggers.resolve_log_level(name, logging.INFO) == expected


def test_get_file_handler_creates_log_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    log_dir = tmp_path / "nested" / "logs"
    monkeypatch.setattr(loggers, "LOG_DIR", str(log_dir))
    monkeypatch.setattr(loggers, "LOG_FILE", str(log_dir / "debug.log"))

    handler = loggers.get_file_handler()
    try:
        assert log_dir.is_dir()
        assert handler.baseFilename == str(log_dir / "debug.log")
        assert handler.level == loggers.file_log_level
    finally:
        handler.close()


def test_get_logger_reuses_configured_logger() -> None:
    logger = loggers.get_logger("autopaginate.tests.plain", plain_format=True)

    assert loggers.get_logger("autopaginate.tests.plain") is logger
    assert len(logger.handlers) == 1
    assert logger.propagate is False
