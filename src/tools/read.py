"""MCP tool that reads a value from the cache.

Registers the 'cache_read' tool. The read may block in blocking mode
while another caller refreshes the key, so it runs in a worker thread
to keep the event loop free.
"""

from __future__ import annotations

import asyncio
from typing import Any, List, Optional, Union

from mcp.server.fastmcp import FastMCP

from core.inputs import normalize_key, normalize_seconds
from core.models import ABSENT, Fresh, ReadResult
from services.cache_service import CacheService


def to_payload(result: ReadResult) -> dict:
    if result is ABSENT:
        return {"status": "absent", "value": None}
    if isinstance(result, Fresh):
        return {"status": "fresh", "value": result.value}
    return {"status": "stale", "value": result.value, "claimed": result.claimed}


def register(mcp: FastMCP, *, cache_service: CacheService) -> None:
    @mcp.tool(name="cache_read")
    async def cache_read(
        key: Union[str, int, List[Any]],
        timeout: Optional[float] = None,
    ) -> dict:
        """Read a key from the cache.

        Parameters:
          - key: string, integer or array (arrays act as compound keys).
          - timeout: seconds to wait for another caller's refresh in
            blocking mode (default from config; none waits forever).

        Returns:
          {"status": "fresh" | "stale" | "absent", "value": ...}.
          "absent" after an expired read in blocking mode means this caller
          should refresh the key with cache_store or give it up with
          cache_release. Stale results carry "claimed".
        """
        cache_key = normalize_key(key)
        wait = normalize_seconds(timeout, name="timeout")

        result = await asyncio.to_thread(cache_service.lookup, cache_key, timeout=wait)
        return to_payload(result)
