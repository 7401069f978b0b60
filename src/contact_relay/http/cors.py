from __future__ import annotations

from typing import Dict, Iterable, Optional

ALLOWED_METHODS = "POST, OPTIONS"
ALLOWED_HEADERS = "Content-Type, Accept"


def is_allowed_origin(origin: Optional[str], allowed_origins: Iterable[str]) -> bool:
    return bool(origin) and origin in set(allowed_origins)


def is_rejected_origin(origin: Optional[str], allowed_origins: Iterable[str]) -> bool:
    """A browser origin is present and not on the list. Missing origin (server-to-server) passes."""
    return bool(origin) and not is_allowed_origin(origin, allowed_origins)


def cors_headers(
    origin: Optional[str],
    allowed_origins: Iterable[str],
    default_origin: str,
) -> Dict[str, str]:
    """
    Headers set on every response, before any early return.

    Unknown or missing origins are never reflected; the default origin is sent
    instead so a browser can still read error bodies.
    """
    allow_origin = origin if is_allowed_origin(origin, allowed_origins) else default_origin
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Vary": "Origin",
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        "Cache-Control": "no-store",
    }
