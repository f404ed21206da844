"""Query string helpers for Stargate API requests."""

from __future__ import annotations

from typing import Any
from typing import Mapping


def urlsafe(value: Any) -> str:
    """Prepare a value for use in a query string.

    Only literal spaces are escaped. Booleans render the way JSON spells them
    and ``None`` renders as an empty string.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value.replace(" ", "%20")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_query_string(params: Mapping[str, Any]) -> str:
    """Transform a flat mapping into a query string (no leading ``?``).

    Keys whose value is ``None`` are left out.
    """
    return "&".join(f"{key}={urlsafe(value)}" for key, value in params.items() if value is not None)
