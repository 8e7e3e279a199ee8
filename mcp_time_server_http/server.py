"""HTTP-based MCP server (streamable HTTP transport).

Runs as an ASGI app (Starlette) so MCP clients can connect over HTTP
using the server URL. Tools are the same as the stdio server.
"""

import contextlib
import sys

from starlette.applications import Starlette
from starlette.routing import Mount

from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from mcp_time_server.config import ServerSettings, load_settings
from mcp_time_server.logging_config import setup_logging
from mcp_time_server.server import create_server


def create_app(settings: ServerSettings) -> Starlette:
    """Wrap the MCP server into a Starlette app."""
    app = create_server(settings.server_name)

    # Streamable HTTP session manager wraps the MCP server into an ASGI app
    session_manager = StreamableHTTPSessionManager(
        app=app,
        json_response=False,  # use SSE streaming responses (recommended for MCP)
        stateless=False,      # keep sessions so tools/list isn't re-negotiated each call
    )

    @contextlib.asynccontextmanager
    async def lifespan(_):
        async with session_manager.run():
            yield

    return Starlette(
        routes=[Mount("/", app=session_manager.handle_request)],
        lifespan=lifespan,
    )


def main():
    import uvicorn

    settings = load_settings()
    setup_logging(settings)
    starlette_app = create_app(settings)

    print(
        f"Starting HTTP MCP Time Server on http://{settings.http_host}:{settings.http_port}",
        file=sys.stderr,
        flush=True,
    )
    uvicorn.run(
        starlette_app,
        host=settings.http_host,
        port=settings.http_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
