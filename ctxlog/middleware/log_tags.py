"""
ctxlog.middleware.log_tags

Purpose:
    Middleware that binds a per-request log tag for the duration of each request
    and echoes it back to the client.

Created:
    2026-10-17
"""

from __future__ import annotations

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ctxlog.contracts.tag_policy import TagPolicy
from ctxlog.core.tags import log_tag
from ctxlog.settings import get_settings


class LogTagMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, policy: TagPolicy | None = None) -> None:
        super().__init__(app)
        self._policy = policy or TagPolicy.from_settings(get_settings())

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        policy = self._policy

        incoming = (
            request.headers.get(policy.request_id_header)
            or request.headers.get(policy.correlation_id_header)
        )

        # None -> random id
        with log_tag(policy.tag_key, incoming or None, num_triads=policy.id_triads) as value:
            request.state.request_id = value
            response: Response = await call_next(request)

        response.headers[policy.response_header] = str(value)
        return response
