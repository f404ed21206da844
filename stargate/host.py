"""Resolve a Stargate host descriptor into a request URL and Host header.

A host can be given as a base URL string or as a :class:`HostAddress`. The
structured form lets a request go to one address while presenting a different
virtual hostname, roughly ``curl -H 'Host: stargate.edge.network' https://1.2.3.4``::

    host = HostAddress(address="1.2.3.4", host="stargate.edge.network", protocol="https")
    url, header = parse_host(host)

Not to be confused with ``host`` nodes in the network.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class HostAddress:
    """Connection target plus the virtual hostname to send in the Host header."""

    address: str
    host: str
    protocol: str = "https"


Host = Union[str, HostAddress]


def parse_host(h: Host) -> tuple[str, str]:
    """Return ``(base_url, host_header)`` for a host descriptor.

    A string that does not start with ``http://`` or ``https://`` yields an
    empty host header.
    """
    if isinstance(h, str):
        match = re.match(r"^https?://([^/]+)", h)
        return h, match.group(1) if match else ""
    if isinstance(h, HostAddress):
        return f"{h.protocol}://{h.address}", h.host
    raise TypeError(f"Unsupported host descriptor: {type(h).__name__}")
