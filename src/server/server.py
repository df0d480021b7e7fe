"""Server bootstrap for the cache MCP service.

Creates the FastMCP instance, builds and initializes one CacheService
from the environment configuration, wires the tools to it and starts
the MCP server (stdio transport).
"""

import logging

from mcp.server.fastmcp import FastMCP

from config import LOG_LEVEL, load_cache_config
from services.cache_service import CacheService

from tools.clear import register as register_clear
from tools.default_ttl import register as register_default_ttl
from tools.read import register as register_read
from tools.release import register as register_release
from tools.remove import register as register_remove
from tools.store import register as register_store

mcp = FastMCP("cache-mcp")


def configure_logging() -> None:
    # stdout carries the protocol; basicConfig writes to stderr
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def register_tools() -> CacheService:
    cache_service = CacheService(load_cache_config())
    cache_service.initialize()

    register_store(mcp, cache_service=cache_service)
    register_read(mcp, cache_service=cache_service)
    register_remove(mcp, cache_service=cache_service)
    register_release(mcp, cache_service=cache_service)
    register_clear(mcp, cache_service=cache_service)
    register_default_ttl(mcp, cache_service=cache_service)
    return cache_service


configure_logging()
cache_service = register_tools()


def main() -> None:
    try:
        mcp.run(transport="stdio")
    finally:
        cache_service.shutdown()


if __name__ == "__main__":
    main()
