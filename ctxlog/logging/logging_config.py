"""
ctxlog.logging.logging_config

Purpose:
    Logging setup for services using ctxlog.
    Ensures the current log tags are present on every record.

Created:
    2026-10-17
"""

from __future__ import annotations

import logging

from ctxlog.logging.tag_filter import LogTagsFilter
from ctxlog.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(log_tags_text)s | %(name)s | %(message)s"


def _make_handler(settings: Settings) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(settings.log_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(LogTagsFilter(request_tag_key=settings.request_tag_key))
    return handler


def _find_tag_handler(logger: logging.Logger) -> logging.Handler | None:
    for h in logger.handlers:
        if any(isinstance(f, LogTagsFilter) for f in h.filters):
            return h
    return None


def configure_logging(settings: Settings | None = None) -> logging.Handler:
    """
    Attach a tag-aware stream handler to the root logger and return it.
    Safe to call repeatedly: a later call re-applies level and tag key to the
    same handler. Other root handlers are left alone.
    """
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(settings.log_level)

    handler = _find_tag_handler(root)
    if handler is None:
        handler = _make_handler(settings)
        root.addHandler(handler)
        return handler

    handler.setLevel(settings.log_level)
    for f in [f for f in handler.filters if isinstance(f, LogTagsFilter)]:
        handler.removeFilter(f)
    handler.addFilter(LogTagsFilter(request_tag_key=settings.request_tag_key))
    return handler
