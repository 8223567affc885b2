"""Shared fixtures for card service tests.

The profile service is replaced by an ``httpx.MockTransport`` that serves
whatever the test puts in the ``upstream`` dict:

* a dict -- returned as the JSON body with status 200
* an int -- returned as a bare status code
* an exception -- raised from the transport (simulates network failure)

Identifiers missing from the dict get a 404.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import unquote

import httpx
import pytest
from fastapi.testclient import TestClient

from bizbuz.server.app import create_app
from bizbuz.server.config import Settings


def _make_handler(upstream: dict[str, Any]):
    def handler(request: httpx.Request) -> httpx.Response:
        identifier = unquote(request.url.path.rsplit("/profile/", 1)[-1])
        entry = upstream.get(identifier)
        if entry is None:
            return httpx.Response(404, json={"error": "not found"})
        if isinstance(entry, Exception):
            raise entry
        if isinstance(entry, int):
            return httpx.Response(entry)
        return httpx.Response(200, json=entry)

    return handler


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


@pytest.fixture()
def settings(monkeypatch) -> Settings:
    monkeypatch.setenv("PROF_BASE_URL", "http://prof.test")
    monkeypatch.delenv("PORT", raising=False)
    return Settings()


@pytest.fixture()
def upstream() -> dict[str, Any]:
    """Profiles served by the simulated profile service, keyed by identifier."""
    return {}


@pytest.fixture()
def app(settings, upstream):
    """Create a card service app talking to the simulated profile service."""
    return create_app(settings, profile_transport=httpx.MockTransport(_make_handler(upstream)))


@pytest.fixture()
def client(app):
    """Return a TestClient for the app with lifespan triggered."""
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def offline_client(settings):
    """TestClient whose profile service is unreachable."""
    app = create_app(settings, profile_transport=httpx.MockTransport(_unreachable))
    with TestClient(app) as c:
        yield c
