"""
MCP server entrypoint for junit-report.

Thin wrapper: sets up the MCP server, registers the tools from
handlers and routes tool calls to them.
"""

from __future__ import annotations

import asyncio
import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent

from .handlers.core import HANDLERS, TOOLS

logger = logging.getLogger(__name__)

# Create the MCP server instance
server = Server("junit-report")


# =============================================================================
# Tool Registration
# =============================================================================

@server.list_tools()
async def list_tools():
    """List all available tools."""
    return TOOLS


# =============================================================================
# Tool Router
# =============================================================================

@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Route tool calls to appropriate handlers."""
    logger.info(f"Tool called: {name}")

    handler = HANDLERS.get(name)

    if handler:
        return await handler(arguments)

    return [TextContent(type="text", text=f"Unknown tool: {name}")]


# =============================================================================
# Entry Point
# =============================================================================

async def run_server():
    """Run the MCP server."""
    logger.info("Starting JUnit Report MCP Server...")
    logger.info(f"Registered {len(TOOLS)} tools: {[t.name for t in TOOLS]}")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Entry point."""
    logging.basicConfig(level=logging.INFO)
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
