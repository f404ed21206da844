"""Client library for the Stargate network monitoring API.

Usage:
    from stargate import HostAddress, session, service

    live = await session.open_sessions("https://stargate.edge.network")
    svc = await service.get(
        HostAddress(address="1.2.3.4", host="stargate.edge.network", protocol="https"),
        "stargate",
    )
"""

from stargate import service
from stargate import session
from stargate.helpers import to_query_string
from stargate.helpers import urlsafe
from stargate.host import Host
from stargate.host import HostAddress
from stargate.host import parse_host
from stargate.http import RequestHook

__version__ = "0.1.0"
__all__ = [
    "service",
    "session",
    "Host",
    "HostAddress",
    "RequestHook",
    "parse_host",
    "to_query_string",
    "urlsafe",
    "__version__",
]
