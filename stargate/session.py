"""Session queries against a Stargate.

Closed sessions require a bearer token; open sessions are public::

    closed = await closed_sessions("https://stargate.edge.network", "my-bearer-token")
    live = await open_sessions("https://stargate.edge.network")

Response bodies are returned as plain dicts shaped like the TypedDicts below.
They are not validated.
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Mapping
from typing import NotRequired
from typing import TypedDict

import httpx

from stargate.helpers import to_query_string
from stargate.host import Host
from stargate.host import parse_host
from stargate.http import RequestHook
from stargate.http import fetch_json

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Response shapes
# ---------------------------------------------------------------------------

CdnData = TypedDict("CdnData", {"in": int, "out": int})


class CdnTiming(TypedDict):
    download: float
    processing: float
    total: float


class CdnMetrics(TypedDict):
    """Metrics recorded for devices that serve CDN requests (hosts only)."""

    requests: int
    data: CdnData
    timing: CdnTiming


class Metrics(TypedDict):
    """Metrics recorded for sessions."""

    messages: int
    cdn: NotRequired[CdnMetrics]


class Geolocation(TypedDict, total=False):
    city: str
    country: str
    countryCode: str
    lat: float
    lng: float


class Node(TypedDict):
    """A device participating in the network."""

    type: str  # host, gateway or stargate
    version: str
    address: str
    session: str
    stake: str
    gateway: NotRequired[str]  # set when type is host
    stargate: NotRequired[str]  # set when type is gateway
    geo: NotRequired[Geolocation]


class Session(TypedDict):
    """Open or closed session. Use is_open/is_closed to tell them apart."""

    node: Node
    start: int
    lastActive: NotRequired[int]
    end: NotRequired[int]
    metrics: NotRequired[Metrics]


class ClosedSession(TypedDict):
    node: Node
    start: int
    end: int
    metrics: Metrics


class OpenSession(TypedDict):
    node: Node
    start: int
    lastActive: int
    metrics: Metrics


ClosedSessionsParams = TypedDict("ClosedSessionsParams", {"from": int, "to": int}, total=False)
"""Time window filter for closed sessions.

``from`` alone matches sessions that ended after it, ``to`` alone matches
sessions that started before it, and both together match sessions active at
any point between them.
"""


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


async def closed_sessions(
    host: Host,
    token: str,
    params: ClosedSessionsParams | Mapping[str, Any] | None = None,
    *,
    hook: RequestHook | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[ClosedSession]:
    """Get closed sessions from a Stargate."""
    base_url, header = parse_host(host)
    url = f"{base_url}/sessions/closed"
    if params is not None:
        url += f"?{to_query_string(params)}"
    return await fetch_json(
        url,
        header,
        headers={"Authorization": f"Bearer {token}"},
        hook=hook,
        client=client,
    )


async def open_sessions(
    host: Host,
    *,
    hook: RequestHook | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[OpenSession]:
    """Get open sessions from a Stargate."""
    base_url, header = parse_host(host)
    return await fetch_json(f"{base_url}/sessions/open", header, hook=hook, client=client)


async def sessions(
    host: Host,
    token: str,
    params: ClosedSessionsParams | Mapping[str, Any] | None = None,
    *,
    hook: RequestHook | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[Session]:
    """Get closed sessions followed by open sessions.

    The two requests are made one after the other, closed first, so the
    result order does not depend on which response arrives first.
    """
    closed = await closed_sessions(host, token, params, hook=hook, client=client)
    live = await open_sessions(host, hook=hook, client=client)
    logger.debug(f"Fetched {len(closed)} closed and {len(live)} open sessions")
    return [*closed, *live]


def is_open(session: Mapping[str, Any]) -> bool:
    """Determine whether a session is open."""
    return "end" not in session


def is_closed(session: Mapping[str, Any]) -> bool:
    """Determine whether a session is closed."""
    return not is_open(session)
