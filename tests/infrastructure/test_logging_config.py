"""Tests for the logging setup."""

import asyncio
import logging

import pytest

from labelkit.infrastructure.logging_config import (
    TaskContextFilter,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_app_logger():
    yield
    app_logger = logging.getLogger("labelkit")
    for handler in app_logger.handlers:
        handler.close()
    app_logger.handlers.clear()
    app_logger.propagate = True
    app_logger.setLevel(logging.NOTSET)


def _record() -> logging.LogRecord:
    return logging.LogRecord("labelkit.test", logging.INFO, __file__, 1, "msg", None, None)


def test_filter_outside_event_loop():
    record = _record()
    assert TaskContextFilter().filter(record) is True
    assert record.task_name == "main"


def test_filter_uses_task_name():
    async def in_task():
        record = _record()
        TaskContextFilter().filter(record)
        return record.task_name

    async def main():
        return await asyncio.create_task(in_task(), name="print-0011135808409")

    assert asyncio.run(main()) == "print-0011135808409"


def test_get_logger_namespaces_names():
    assert get_logger("cli").name == "labelkit.cli"
    assert get_logger("labelkit.domain").name == "labelkit.domain"
    assert get_logger("labelkit").name == "labelkit"


def test_console_only_by_default():
    logger = setup_logging("DEBUG")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_file_logging(tmp_path):
    logger = setup_logging(logging.INFO, log_dir=tmp_path / "logs")
    assert len(logger.handlers) == 3

    get_logger("labelkit.test").error("label jammed")
    for handler in logger.handlers:
        handler.flush()

    assert "label jammed" in (tmp_path / "logs" / "labelkit.log").read_text(encoding="utf-8")
    assert "[main]" in (tmp_path / "logs" / "labelkit_error.log").read_text(encoding="utf-8")


def test_setup_twice_replaces_handlers():
    setup_logging()
    logger = setup_logging()
    assert len(logger.handlers) == 1
