"""Test configuration and fixtures."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import Any

import httpx
import pytest
import pytest_asyncio

from stargate.config import get_settings

BASE_URL = "https://stargate.edge.network"


@dataclass
class RecordingTransport:
    """Fake Stargate that records every request it receives.

    ``routes`` maps a URL path to the JSON body served for it; unknown paths
    get a 404.
    """

    routes: dict[str, Any] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)
    status_code: int = 200

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path not in self.routes:
            return httpx.Response(404, json={"error": "not found"})
        return httpx.Response(self.status_code, json=self.routes[request.url.path])

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Drop STARGATE_* variables and the cached settings around each test."""
    for name in ("URL", "ADDRESS", "HOST_HEADER", "PROTOCOL", "TOKEN", "TIMEOUT"):
        monkeypatch.delenv(f"STARGATE_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def closed_fixture() -> list[dict]:
    return [
        {
            "node": {
                "type": "host",
                "version": "1.4.0",
                "address": "xe_host1",
                "session": "sess-1",
                "stake": "stake-1",
                "gateway": "xe_gw1",
                "geo": {"city": "London", "countryCode": "GB"},
            },
            "start": 1000,
            "end": 2000,
            "metrics": {
                "messages": 12,
                "cdn": {
                    "requests": 4,
                    "data": {"in": 10, "out": 20},
                    "timing": {"download": 1.5, "processing": 0.5, "total": 2.0},
                },
            },
        },
        {
            "node": {
                "type": "gateway",
                "version": "1.4.0",
                "address": "xe_gw1",
                "session": "sess-2",
                "stake": "stake-2",
                "stargate": "xe_sg1",
            },
            "start": 1500,
            "end": 2500,
            "metrics": {"messages": 3},
        },
    ]


@pytest.fixture
def open_fixture() -> list[dict]:
    return [
        {
            "node": {
                "type": "host",
                "version": "1.5.0",
                "address": "xe_host2",
                "session": "sess-3",
                "stake": "stake-3",
            },
            "start": 3000,
            "lastActive": 3500,
            "metrics": {"messages": 1},
        },
    ]


@pytest.fixture
def transport(closed_fixture, open_fixture) -> RecordingTransport:
    return RecordingTransport(
        routes={
            "/sessions/closed": closed_fixture,
            "/sessions/open": open_fixture,
            "/services": {"services": [{"name": "stargate", "version": "1.0.0"}, {"name": "index", "version": "2.1.0", "integrations": True}]},
            "/services/index": {"name": "index", "version": "2.1.0", "integrations": True},
        }
    )


@pytest_asyncio.fixture
async def client(transport: RecordingTransport):
    async with transport.client() as c:
        yield c
