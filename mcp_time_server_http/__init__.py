"""Streamable-HTTP transport for the MCP time server."""
