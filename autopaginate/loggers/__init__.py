import logging
from logging import FileHandler, Logger, StreamHandler
import os
from typing import Any

from autopaginate.main.config import config

LOG_DIR = config.app.LOG_DIR
LOG_FILE = os.path.join(LOG_DIR, "debug.log")

logging_format = "%(asctime)s [%(levelname)s]|[%(process)d]| %(name)s: %(message)s"
time_logging_format = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(name: str, default: int) -> int:
    """Numeric level for a level name in any case; unknown names use ``default``."""
    return logging.getLevelNamesMapping().get(name.strip().upper(), default)


log_level = resolve_log_level(config.app.LOG_LEVEL, logging.INFO)
file_log_level = resolve_log_level(config.app.LOG_LEVEL_FILE, logging.WARNING)


def get_file_handler() -> FileHandler:
    os.makedirs(LOG_DIR, exist_ok=True)
    file_handler = logging.FileHandler(LOG_FILE, "a", "utf-8")
    file_handler.setLevel(file_log_level)
    file_handler.setFormatter(logging.Formatter(logging_format, time_logging_format))
    return file_handler


def get_stream_handler() -> StreamHandler:  # type: ignore
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(log_level)
    stream_handler.setFormatter(logging.Formatter(logging_format, time_logging_format))
    return stream_handler


def get_logger(name: Any, *, plain_format: bool = False) -> Logger:
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(log_level)

    if plain_format:
        formatter = logging.Formatter(
            "%(asctime)s [%(process)d]| %(message)s", time_logging_format
        )
        stream_handler = StreamHandler()
        stream_handler.setLevel(log_level)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
    else:
        logger.addHandler(get_file_handler())
        logger.addHandler(get_stream_handler())

    logger.propagate = False
    return logger
