"""
tests.logs.test_tag_filter

Purpose:
    LogTagsFilter record enrichment and configure_logging idempotency.
"""

from __future__ import annotations

import logging

import pytest

from ctxlog.core.tags import log_tags
from ctxlog.logging.logging_config import configure_logging
from ctxlog.logging.tag_filter import LogTagsFilter
from ctxlog.settings import Settings


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, msg, None, None)


def test_filter_without_tags_uses_placeholders() -> None:
    record = _record()
    assert LogTagsFilter().filter(record) is True

    assert record.log_tags == {}
    assert record.log_tags_text == "-"
    assert record.request_id == "-"


def test_filter_injects_current_tags() -> None:
    record = _record()
    with log_tags(request_id="r1", tenant="acme", skipped=None):
        LogTagsFilter().filter(record)

    assert record.log_tags == {"request_id": "r1", "tenant": "acme", "skipped": None}
    assert record.log_tags_text == "request_id=r1 tenant=acme"
    assert record.request_id == "r1"


def test_filter_uses_configured_request_key() -> None:
    record = _record()
    with log_tags(rid="r2"):
        LogTagsFilter(request_tag_key="rid").filter(record)
    assert record.request_id == "r2"


@pytest.mark.parametrize("value", [0, "", False])
def test_filter_keeps_falsy_request_tag(value) -> None:
    record = _record()
    with log_tags(request_id=value):
        LogTagsFilter().filter(record)
    assert record.request_id == value


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
    root.setLevel(level)


def test_configure_logging_is_idempotent(restore_root_logger) -> None:
    root = restore_root_logger
    settings = Settings(log_level="debug")

    first = configure_logging(settings)
    second = configure_logging(settings)

    assert first is second
    assert root.handlers.count(first) == 1
    assert root.level == logging.DEBUG


def test_configure_logging_reapplies_new_settings(restore_root_logger) -> None:
    root = restore_root_logger

    first = configure_logging(Settings(log_level="INFO"))
    second = configure_logging(Settings(log_level="DEBUG", request_tag_key="rid"))

    assert first is second
    assert root.level == logging.DEBUG
    assert second.level == logging.DEBUG

    tag_filters = [f for f in second.filters if isinstance(f, LogTagsFilter)]
    assert len(tag_filters) == 1

    record = _record()
    with log_tags(rid="r7"):
        tag_filters[0].filter(record)
    assert record.request_id == "r7"


def test_configured_handler_renders_tags(restore_root_logger) -> None:
    handler = configure_logging(Settings())

    record = _record("payment accepted")
    with log_tags(request_id="r3"):
        for f in handler.filters:
            f.filter(record)
    line = handler.format(record)

    assert "| INFO | request_id=r3 | test | payment accepted" in line
