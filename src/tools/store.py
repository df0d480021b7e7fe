"""MCP tool that stores a value in the cache.

Registers the 'cache_store' tool which validates the key and TTL and
delegates to the CacheService.
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from mcp.server.fastmcp import FastMCP

from core.inputs import normalize_key, normalize_seconds
from services.cache_service import CacheService


def register(mcp: FastMCP, *, cache_service: CacheService) -> None:
    @mcp.tool(name="cache_store")
    async def cache_store(
        key: Union[str, int, List[Any]],
        value: Any = None,
        ttl_seconds: Optional[float] = None,
    ) -> dict:
        """Store a JSON value under a key.

        Parameters:
          - key: string, integer or array (arrays act as compound keys).
          - value: any JSON value.
          - ttl_seconds: time-to-live in whole seconds. Omit to use the
            default TTL; 0 makes the entry stale on the next read.

        Returns:
          {"stored": bool}; false only when the cache has capacity 0.
        """
        cache_key = normalize_key(key)
        ttl = normalize_seconds(ttl_seconds, name="ttl_seconds")

        return {"stored": cache_service.store(cache_key, value, ttl)}
