"""
tests.middleware.conftest

Shared pytest fixtures for middleware tests.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from ctxlog.contracts.tag_policy import TagPolicy
from ctxlog.core.tags import current_tags
from ctxlog.middleware.log_tags import LogTagMiddleware


def _create_app(policy: TagPolicy | None) -> FastAPI:
    app = FastAPI()
    app.add_middleware(LogTagMiddleware, policy=policy)

    @app.get("/tags")
    async def tags(request: Request) -> dict:
        return {"tags": current_tags(), "state": request.state.request_id}

    return app


@pytest.fixture()
def client_factory(monkeypatch):
    """
    Factory fixture that creates a fresh TestClient, optionally with a custom policy.
    """
    for name in ("CTXLOG_LOG_LEVEL", "CTXLOG_REQUEST_TAG_KEY", "CTXLOG_ID_TRIADS"):
        monkeypatch.delenv(name, raising=False)

    def _make(policy: TagPolicy | None = None) -> TestClient:
        return TestClient(_create_app(policy), raise_server_exceptions=True)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    return client_factory()


@pytest.fixture()
def app_factory(monkeypatch):
    """
    Factory for the bare ASGI app, for tests that drive it inside their own event loop.
    """
    for name in ("CTXLOG_LOG_LEVEL", "CTXLOG_REQUEST_TAG_KEY", "CTXLOG_ID_TRIADS"):
        monkeypatch.delenv(name, raising=False)

    def _make(policy: TagPolicy | None = None) -> FastAPI:
        return _create_app(policy)

    return _make
