"""MCP tool to inspect or change the default time-to-live.

Registers 'cache_default_ttl'. Without arguments it reports the current
default; with 'seconds' (or 'never') it replaces it for later stores.
"""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP

from core.inputs import normalize_seconds
from core.models import Expiration
from services.cache_service import CacheService


def _describe(ttl: Expiration) -> dict:
    return {"seconds": ttl.to_seconds(), "never": ttl.is_never}


def register(mcp: FastMCP, *, cache_service: CacheService) -> None:
    @mcp.tool(name="cache_default_ttl")
    async def cache_default_ttl(seconds: Optional[float] = None, never: bool = False) -> dict:
        """Get or set the default TTL used when cache_store has no ttl_seconds.

        Params:
          - seconds: new default in seconds (truncated to whole seconds).
          - never: set to true to make entries never expire by default.

        Returns:
          {"seconds": int | null, "never": bool} after applying any change.
        """
        if never:
            cache_service.default_ttl = Expiration.never()
        else:
            value = normalize_seconds(seconds, name="seconds")
            if value is not None:
                cache_service.default_ttl = value

        return _describe(cache_service.default_ttl)
