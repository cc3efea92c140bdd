"""
ctxlog.logging.tag_filter

Purpose:
    Logging filter that injects the current log tags into log records.

Created:
    2026-10-17
"""

from __future__ import annotations

import logging

from ctxlog.core.tags import current_tags


def format_tags(tags: dict) -> str:
    return " ".join(f"{k}={tags[k]}" for k in sorted(tags) if tags[k] is not None)


class LogTagsFilter(logging.Filter):
    def __init__(self, request_tag_key: str = "request_id") -> None:
        super().__init__()
        self._request_tag_key = request_tag_key

    def filter(self, record: logging.LogRecord) -> bool:
        tags = current_tags()
        record.log_tags = tags
        record.log_tags_text = format_tags(tags) or "-"
        value = tags.get(self._request_tag_key)
        record.request_id = "-" if value is None else value
        return True
