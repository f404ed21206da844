"""Command-line interface for querying a Stargate.

Usage:
    stargate open                       # Open sessions
    stargate closed --from 1700000000   # Closed sessions (needs a token)
    stargate sessions                   # Closed then open sessions (needs a token)
    stargate services                   # Service list
    stargate service NAME               # A single service

Target and token default from STARGATE_* environment variables.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any
from typing import Awaitable
from typing import Callable

import httpx
import typer

from stargate import service
from stargate import session
from stargate.config import get_settings
from stargate.host import Host
from stargate.http import new_client

logger = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS = 0
EXIT_REQUEST_ERROR = 1
EXIT_CONFIG_ERROR = 2

app = typer.Typer(
    name="stargate",
    help="Query a Stargate for sessions and services",
    no_args_is_help=True,
)


@dataclass
class Target:
    host: Host
    token: str | None
    timeout: float | None


@app.callback()
def main(
    ctx: typer.Context,
    url: str | None = typer.Option(None, "--url", help="Stargate base URL"),
    address: str | None = typer.Option(None, "--address", help="Connect to this address instead of resolving the URL"),
    host_header: str | None = typer.Option(None, "--host-header", help="Host header to send with --address"),
    protocol: str | None = typer.Option(None, "--protocol", help="Scheme to use with --address"),
    token: str | None = typer.Option(None, "--token", help="Bearer token for closed sessions"),
    timeout: float | None = typer.Option(None, "--timeout", help="Request timeout in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests"),
) -> None:
    """Resolve the target from options and STARGATE_* environment variables."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    overrides = {
        "url": url,
        "address": address,
        "host_header": host_header,
        "protocol": protocol,
        "token": token,
        "timeout": timeout,
    }
    settings = get_settings().model_copy(update={k: v for k, v in overrides.items() if v is not None})
    ctx.obj = Target(host=settings.host(), token=settings.token, timeout=settings.timeout)


def _require_token(target: Target) -> str:
    if not target.token:
        typer.secho("Error: a token is required (--token or STARGATE_TOKEN)", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_CONFIG_ERROR)
    return target.token


def _window(from_: int | None, to: int | None) -> dict[str, int] | None:
    params = {k: v for k, v in {"from": from_, "to": to}.items() if v is not None}
    return params or None


def _run(target: Target, fetch: Callable[[httpx.AsyncClient], Awaitable[Any]]) -> None:
    """Run one query against a fresh client and print the JSON body."""

    async def _main() -> Any:
        async with new_client(target.timeout) as client:
            return await fetch(client)

    try:
        body = asyncio.run(_main())
    except (httpx.HTTPError, ValueError) as e:
        logger.debug("Request failed", exc_info=True)
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_REQUEST_ERROR)
    typer.echo(json.dumps(body, indent=2))


@app.command(name="open")
def open_cmd(ctx: typer.Context) -> None:
    """List open sessions."""
    target: Target = ctx.obj
    _run(target, lambda client: session.open_sessions(target.host, client=client))


@app.command(name="closed")
def closed_cmd(
    ctx: typer.Context,
    from_: int | None = typer.Option(None, "--from", help="Start of time window"),
    to: int | None = typer.Option(None, "--to", help="End of time window"),
) -> None:
    """List closed sessions, optionally within a time window."""
    target: Target = ctx.obj
    token = _require_token(target)
    params = _window(from_, to)
    _run(target, lambda client: session.closed_sessions(target.host, token, params, client=client))


@app.command(name="sessions")
def sessions_cmd(
    ctx: typer.Context,
    from_: int | None = typer.Option(None, "--from", help="Start of time window for closed sessions"),
    to: int | None = typer.Option(None, "--to", help="End of time window for closed sessions"),
) -> None:
    """List closed sessions followed by open sessions."""
    target: Target = ctx.obj
    token = _require_token(target)
    params = _window(from_, to)
    _run(target, lambda client: session.sessions(target.host, token, params, client=client))


@app.command(name="services")
def services_cmd(ctx: typer.Context) -> None:
    """List services."""
    target: Target = ctx.obj
    _run(target, lambda client: service.list_services(target.host, client=client))


@app.command(name="service")
def service_cmd(ctx: typer.Context, name: str = typer.Argument(..., help="Service name")) -> None:
    """Show a single service."""
    target: Target = ctx.obj
    _run(target, lambda client: service.get(target.host, name, client=client))
