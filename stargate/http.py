"""Request dispatch shared by the session and service accessors.

Every call builds a fresh GET request, lets the caller's hook modify it, and
sends it. Errors from httpx (connection failures, timeouts, non-2xx status)
are not caught here.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any
from typing import Awaitable
from typing import Callable
from typing import Union

import httpx

logger = logging.getLogger(__name__)

RequestHook = Callable[[httpx.Request], Union[httpx.Request, Awaitable[httpx.Request]]]
"""Callback allowing a request to be modified before it is sent.

For example, a 100ms timeout on a single call::

    def short_timeout(r: httpx.Request) -> httpx.Request:
        r.extensions["timeout"] = httpx.Timeout(0.1).as_dict()
        return r

    await open_sessions("https://stargate.edge.network", hook=short_timeout)
"""


def new_client(timeout: float | None = None) -> httpx.AsyncClient:
    """Create an AsyncClient configured the way the accessors expect."""
    return httpx.AsyncClient(timeout=timeout, follow_redirects=True)


async def _apply_hook(request: httpx.Request, hook: RequestHook | None) -> httpx.Request:
    if hook is None:
        return request
    result = hook(request)
    if inspect.isawaitable(result):
        result = await result
    return result


async def _send(client: httpx.AsyncClient, url: str, headers: dict[str, str], hook: RequestHook | None) -> Any:
    request = client.build_request("GET", url, headers=headers)
    request = await _apply_hook(request, hook)
    logger.debug(f"{request.method} {request.url}")
    response = await client.send(request)
    logger.debug(f"{request.method} {request.url} -> {response.status_code}")
    response.raise_for_status()
    return response.json()


async def fetch_json(
    url: str,
    host_header: str,
    *,
    headers: dict[str, str] | None = None,
    hook: RequestHook | None = None,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """GET ``url`` and return the decoded JSON body.

    Args:
        url: Full request URL, query string included.
        host_header: Value for the Host header. Empty means httpx derives it from the URL.
        headers: Extra request headers.
        hook: Optional request hook, applied just before dispatch.
        client: Caller-owned client. When omitted, a client is opened for this call only.

    Returns:
        The response body as decoded JSON, unvalidated.
    """
    request_headers: dict[str, str] = {}
    if host_header:
        request_headers["Host"] = host_header
    if headers:
        request_headers.update(headers)

    if client is not None:
        return await _send(client, url, request_headers, hook)
    async with new_client() as owned:
        return await _send(owned, url, request_headers, hook)
