"""MCP server exposing city-aware time tools."""
