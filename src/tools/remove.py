"""MCP tool that removes a key from the cache."""

from __future__ import annotations

from typing import Any, List, Union

from mcp.server.fastmcp import FastMCP

from core.inputs import normalize_key
from services.cache_service import CacheService


def register(mcp: FastMCP, *, cache_service: CacheService) -> None:
    @mcp.tool(name="cache_remove")
    async def cache_remove(key: Union[str, int, List[Any]]) -> dict:
        """Remove a key and return the value it held (null when absent)."""
        return {"value": cache_service.remove(normalize_key(key))}
