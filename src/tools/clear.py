"""MCP tool that empties the cache."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from services.cache_service import CacheService


def register(mcp: FastMCP, *, cache_service: CacheService) -> None:
    @mcp.tool(name="cache_clear")
    async def cache_clear() -> dict:
        """Remove every entry. Callers blocked on a key get an absent result."""
        cache_service.clear()
        return {"cleared": True}
