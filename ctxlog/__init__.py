"""
ctxlog

Request-scoped structured log tags on top of contextvars.
"""

from ctxlog.core.random_ids import DEFAULT_ID_TRIADS, rand_bytes, rand_string_b64
from ctxlog.core.tags import (
    LogTags,
    add_tags_to_context,
    current_tags,
    log_tag,
    log_tags,
    tags_from_context,
    with_log_tag,
    with_log_tag_value,
)
from ctxlog.errors import CtxLogError, RandomSourceError

__all__ = [
    "DEFAULT_ID_TRIADS",
    "CtxLogError",
    "LogTags",
    "RandomSourceError",
    "add_tags_to_context",
    "current_tags",
    "log_tag",
    "log_tags",
    "rand_bytes",
    "rand_string_b64",
    "tags_from_context",
    "with_log_tag",
    "with_log_tag_value",
]
