"""
MCP server entrypoint for nunit-pipeline.

This module is intentionally thin:
- sets up the MCP server
- registers tools (from handlers)
- routes tool calls to handlers
"""


from __future__ import annotations

import asyncio
import logging
import os

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent

from .constants import ENV_LOG_LEVEL
from .handlers.core import HANDLERS as CORE_HANDLERS
from .handlers.core import TOOLS as CORE_TOOLS

def resolve_log_level(name: str | None) -> int | None:
    """Map a level name like "debug" to its number, or None if unknown."""
    level = logging.getLevelName((name or "INFO").strip().upper())
    return level if isinstance(level, int) else None


# Configure logging (stderr; stdout carries the MCP stream)
_log_level = resolve_log_level(os.getenv(ENV_LOG_LEVEL))
logging.basicConfig(level=_log_level if _log_level is not None else logging.INFO)
logger = logging.getLogger(__name__)

if _log_level is None:
    logger.warning(f"Unknown {ENV_LOG_LEVEL}={os.getenv(ENV_LOG_LEVEL)!r}, using INFO")

# Create the MCP server instance
server = Server("nunit-pipeline")


# =============================================================================
# Tool Registration
# =============================================================================

ALL_TOOLS = [*CORE_TOOLS]

ALL_HANDLERS = {**CORE_HANDLERS}


@server.list_tools()
async def list_tools():
    """List all available tools."""
    return ALL_TOOLS


# =============================================================================
# Tool Router
# =============================================================================

@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Route tool calls to appropriate handlers."""
    logger.info(f"Tool called: {name}")

    handler = ALL_HANDLERS.get(name)

    if handler:
        return await handler(arguments)

    return [TextContent(type="text", text=f"Unknown tool: {name}")]


# =============================================================================
# Entry Point
# =============================================================================

async def run_server():
    """Run the MCP server."""
    logger.info("Starting NUnit Pipeline MCP Server...")
    logger.info(f"Registered {len(ALL_TOOLS)} tools: {[t.name for t in ALL_TOOLS]}")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Entry point."""
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
