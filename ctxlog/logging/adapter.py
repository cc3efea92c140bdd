# ctxlog/logging/adapter.py
# Purpose: Logger factory + adapter that prefixes messages with the current log tags.
# Notes: Does not configure handlers; use configure_logging() for that.

from __future__ import annotations

import logging
from typing import Any, Mapping

from ctxlog.core.tags import current_tags
from ctxlog.logging.tag_filter import format_tags

LOGGER_NAMESPACE = "ctxlog"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a logger under the ctxlog namespace. Does NOT configure handlers/levels.
    """
    if not name:
        return logging.getLogger(LOGGER_NAMESPACE)
    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


class TagsLoggerAdapter(logging.LoggerAdapter):
    """
    Prefix log messages with key=value pairs from the current log tags,
    the adapter's own extra, and per-call extra (later wins).
    """

    def __init__(self, logger: logging.Logger, extra: Mapping[str, Any] | None = None):
        super().__init__(logger, dict(extra or {}))

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        extra = kwargs.get("extra") or {}
        merged = {**current_tags(), **self.extra, **extra}

        ctx = format_tags(merged)
        if ctx:
            msg = f"{ctx} | {msg}"

        kwargs["extra"] = {}
        return msg, kwargs


def with_tags(logger: logging.Logger, extra: Mapping[str, Any] | None = None) -> TagsLoggerAdapter:
    return TagsLoggerAdapter(logger, extra)
