"""MCP tool that gives up a refresh claim without storing a value."""

from __future__ import annotations

from typing import Any, List, Union

from mcp.server.fastmcp import FastMCP

from core.inputs import normalize_key
from services.cache_service import CacheService


def register(mcp: FastMCP, *, cache_service: CacheService) -> None:
    @mcp.tool(name="cache_release")
    async def cache_release(key: Union[str, int, List[Any]]) -> dict:
        """Release the refresh claim on a stale key.

        One caller waiting on the key takes over the claim. Returns
        {"released": false} when no claim was pending.
        """
        return {"released": cache_service.release(normalize_key(key))}
