"""Server settings loaded from the environment (and an optional .env file)."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class ServerSettings:
    server_name: str = "mcp-time-server"
    http_host: str = "0.0.0.0"
    http_port: int = 8001
    log_level: str = "INFO"
    log_file: Optional[str] = None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> ServerSettings:
    """
    Build settings from environment variables.

    When no mapping is given, values from a local .env file are loaded into
    os.environ first (existing variables win).
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    port = environ.get("MCP_HTTP_PORT", "8001")
    try:
        http_port = int(port)
    except ValueError:
        raise ValueError(f"MCP_HTTP_PORT must be an integer, got {port!r}") from None

    return ServerSettings(
        server_name=environ.get("MCP_SERVER_NAME", "mcp-time-server"),
        http_host=environ.get("MCP_HTTP_HOST", "0.0.0.0"),
        http_port=http_port,
        log_level=environ.get("MCP_LOG_LEVEL", "INFO").upper(),
        log_file=environ.get("MCP_LOG_FILE") or None,
    )
