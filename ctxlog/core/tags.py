"""
ctxlog.core.tags

Purpose:
    Attach key/value log tags to a contextvars.Context so request-scoped
    identifiers reach downstream loggers without explicit parameters.

Notes:
    - A single private ContextVar holds an immutable MappingProxyType snapshot.
    - Derivation copies the Context; the parent handle is never modified.
    - Reads always return a fresh dict.

Created:
    2026-10-17
"""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from ctxlog.core.random_ids import DEFAULT_ID_TRIADS, rand_string_b64

LogTags = dict[str, Any]

_log_tags_ctx_var: contextvars.ContextVar[Mapping[str, Any] | None] = contextvars.ContextVar(
    "ctxlog_tags",
    default=None,
)


def _snapshot(ctx: contextvars.Context | None) -> Mapping[str, Any] | None:
    if ctx is None:
        return _log_tags_ctx_var.get()
    return ctx.get(_log_tags_ctx_var)


def tags_from_context(ctx: contextvars.Context | None = None) -> LogTags | None:
    """
    Return a copy of the tags carried by `ctx` (current context if None),
    or None if no tags were ever attached.
    """
    snapshot = _snapshot(ctx)
    if snapshot is None:
        return None
    return dict(snapshot)


def add_tags_to_context(
    ctx: contextvars.Context | None, tags: Mapping[str, Any] | None
) -> contextvars.Context:
    """
    Derive a child of `ctx` (current context if None) carrying the existing
    tags merged with `tags`. New values win on key clashes.
    The child is always marked as tagged, even when `tags` is empty or None.
    """
    child = ctx.copy() if ctx is not None else contextvars.copy_context()

    merged: LogTags = dict(child.get(_log_tags_ctx_var) or {})
    merged.update(tags or {})

    child.run(_log_tags_ctx_var.set, MappingProxyType(merged))
    return child


def with_log_tag_value(
    ctx: contextvars.Context | None, key: str, value: Any
) -> contextvars.Context:
    """
    Set `key` only if absent. Returns `ctx` itself when the key is already there.
    """
    snapshot = _snapshot(ctx)
    if snapshot is not None and key in snapshot:
        return ctx if ctx is not None else contextvars.copy_context()
    return add_tags_to_context(ctx, {key: value})


def with_log_tag(
    ctx: contextvars.Context | None, key: str, *, num_triads: int = DEFAULT_ID_TRIADS
) -> contextvars.Context:
    """Set `key` to a fresh random id, only if absent."""
    snapshot = _snapshot(ctx)
    if snapshot is not None and key in snapshot:
        return ctx if ctx is not None else contextvars.copy_context()
    return add_tags_to_context(ctx, {key: rand_string_b64(num_triads)})


# ---------------------------------------------------------------------------
# Current-context helpers
# ---------------------------------------------------------------------------

def current_tags() -> LogTags:
    return tags_from_context() or {}


@contextmanager
def log_tags(tags: Mapping[str, Any] | None = None, **kwargs: Any) -> Iterator[LogTags]:
    """
    Merge tags into the current context for the duration of the block.

        with log_tags(tenant="acme"):
            logger.info("tagged")
    """
    merged: LogTags = {**current_tags(), **(tags or {}), **kwargs}
    token = _log_tags_ctx_var.set(MappingProxyType(merged))
    try:
        yield dict(merged)
    finally:
        _log_tags_ctx_var.reset(token)


@contextmanager
def log_tag(
    key: str, value: Any = None, *, num_triads: int = DEFAULT_ID_TRIADS
) -> Iterator[Any]:
    """
    Set-if-absent variant of log_tags for one key. A None value means a random id.
    Yields the effective value (the existing one if the key was already set).
    """
    existing = _log_tags_ctx_var.get()
    if existing is not None and key in existing:
        yield existing[key]
        return

    if value is None:
        value = rand_string_b64(num_triads)

    with log_tags({key: value}):
        yield value
