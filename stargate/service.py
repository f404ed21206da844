"""Service metadata queries against a Stargate.

Service endpoints are public; no Authorization header is sent.
"""

from __future__ import annotations

from typing import NotRequired
from typing import TypedDict

import httpx

from stargate.host import Host
from stargate.host import parse_host
from stargate.http import RequestHook
from stargate.http import fetch_json


class Service(TypedDict):
    """A service known to Stargate."""

    name: str
    version: str
    integrations: NotRequired[bool]


class ServiceList(TypedDict):
    services: list[Service]


async def get(
    host: Host,
    name: str,
    *,
    hook: RequestHook | None = None,
    client: httpx.AsyncClient | None = None,
) -> Service:
    """Get a single service by name."""
    base_url, header = parse_host(host)
    return await fetch_json(f"{base_url}/services/{name}", header, hook=hook, client=client)


async def list_services(
    host: Host,
    *,
    hook: RequestHook | None = None,
    client: httpx.AsyncClient | None = None,
) -> ServiceList:
    """Get the list of services."""
    base_url, header = parse_host(host)
    return await fetch_json(f"{base_url}/services", header, hook=hook, client=client)
