"""
ctxlog.contracts.tag_policy

Purpose:
    Central policy for the per-request log tag (header names, tag key, id length).

Created:
    2026-10-17
"""

from __future__ import annotations

from dataclasses import dataclass

from ctxlog.core.random_ids import DEFAULT_ID_TRIADS
from ctxlog.settings import Settings


@dataclass(frozen=True)
class TagPolicy:
    request_id_header: str = "X-Request-Id"
    correlation_id_header: str = "X-Correlation-Id"
    response_header: str = "X-Request-Id"
    tag_key: str = "request_id"
    id_triads: int = DEFAULT_ID_TRIADS

    def __post_init__(self) -> None:
        if self.id_triads < 1:
            raise ValueError(f"id_triads must be >= 1, got {self.id_triads}")
        if not self.tag_key:
            raise ValueError("tag_key must be non-empty")

    @classmethod
    def from_settings(cls, settings: Settings) -> "TagPolicy":
        return cls(tag_key=settings.request_tag_key, id_triads=settings.id_triads)
