"""Environment-driven settings for the ``stargate`` command.

All values come from ``STARGATE_*`` environment variables. Library functions
never read settings; they take explicit arguments.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings

from stargate.host import Host
from stargate.host import HostAddress
from stargate.host import parse_host


class StargateSettings(BaseSettings):
    # Target
    url: str = "https://stargate.edge.network"
    address: str | None = None  # connect here instead of resolving url
    host_header: str | None = None  # defaults to the authority of url
    protocol: str = "https"

    # Auth (closed sessions only)
    token: str | None = None

    # Seconds; None means no timeout
    timeout: float | None = None

    class Config:
        env_prefix = "STARGATE_"

    def host(self) -> Host:
        """Build the host descriptor these settings describe."""
        if not self.address:
            return self.url
        virtual_host = self.host_header or parse_host(self.url)[1]
        return HostAddress(address=self.address, host=virtual_host, protocol=self.protocol)


@lru_cache(maxsize=1)
def get_settings() -> StargateSettings:
    return StargateSettings()
