"""MCP Server implementation with time tools (stdio transport)."""

import sys
import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from mcp_time_server.config import ServerSettings, load_settings
from mcp_time_server.handlers import TOOLS, call_time_tool
from mcp_time_server.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_server(name: str = "mcp-time-server") -> Server:
    """Create an MCP server exposing the time tools."""
    app = Server(name)

    @app.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        return TOOLS

    @app.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        """Handle tool calls."""
        return call_time_tool(name, arguments)

    return app


async def run_server(settings: ServerSettings):
    """Run the MCP server."""
    app = create_server(settings.server_name)
    print("MCP Time Server is running...", file=sys.stderr, flush=True)

    try:
        async with stdio_server() as streams:
            await app.run(streams[0], streams[1], app.create_initialization_options())
    except Exception:
        logger.exception("Server error")
        raise


def main():
    """Entry point for the server."""
    import anyio
    settings = load_settings()
    setup_logging(settings)
    try:
        anyio.run(run_server, settings)
    except KeyboardInterrupt:
        print("Server stopped", file=sys.stderr, flush=True)
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr, flush=True)
        import traceback
        traceback.print_exc(file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
