"""Tool definitions and dispatch shared by the stdio and HTTP servers."""

import logging

from mcp.types import Tool, TextContent

from mcp_time_server.tools import CitySortOrder, TimeTools, TimeZoneError, time_tools

logger = logging.getLogger(__name__)

SORT_ORDER_VALUES = [member.value for member in CitySortOrder]


# Define available tools
TOOLS = [
    Tool(
        name="get_current_time",
        description="Gets the current time (UTC) as YYYY-MM-DD HH:MM:SS",
        inputSchema={
            "type": "object",
            "properties": {}
        }
    ),
    Tool(
        name="get_local_time",
        description="Gets local time for a given city name",
        inputSchema={
            "type": "object",
            "properties": {
                "city": {
                    "type": "string",
                    "description": "City name (e.g., 'Tokyo', 'New York'). Case-insensitive"
                }
            },
            "required": ["city"]
        }
    ),
    Tool(
        name="get_available_city_names",
        description="Gets a list of all available city names",
        inputSchema={
            "type": "object",
            "properties": {
                "sort_order": {
                    "type": "string",
                    "description": f"One of {', '.join(SORT_ORDER_VALUES)}. Defaults to 'Alphabetical'",
                    "default": CitySortOrder.ALPHABETICAL.value
                }
            }
        }
    ),
    Tool(
        name="add_or_update_city_time_zone",
        description="Adds a city-to-timezone mapping or updates an existing one",
        inputSchema={
            "type": "object",
            "properties": {
                "city": {
                    "type": "string",
                    "description": "City name"
                },
                "time_zone_id": {
                    "type": "string",
                    "description": "IANA timezone ID (e.g., 'Europe/Paris')"
                }
            },
            "required": ["city", "time_zone_id"]
        }
    ),
]


def call_time_tool(name: str, arguments: dict, tools: TimeTools = time_tools) -> list[TextContent]:
    """
    Route a tool call to TimeTools.

    Read tools always answer with text. Registry errors from
    add_or_update_city_time_zone are re-raised so the MCP layer reports them
    as an error result.
    """
    arguments = arguments or {}

    if name == "get_current_time":
        result = tools.get_current_time()

    elif name == "get_local_time":
        result = tools.get_local_time(city=arguments.get("city"))

    elif name == "get_available_city_names":
        sort_order = arguments.get("sort_order", CitySortOrder.ALPHABETICAL.value)
        result = tools.get_available_city_names(sort_order=sort_order)

    elif name == "add_or_update_city_time_zone":
        city = arguments.get("city")
        time_zone_id = arguments.get("time_zone_id")
        try:
            tools.add_or_update_city_time_zone(city=city, time_zone_id=time_zone_id)
        except TimeZoneError as e:
            logger.warning("Rejected city registration: %s", e.to_dict())
            raise
        result = f"City '{city}' mapped to timezone '{time_zone_id}'."

    else:
        result = f"Error: Unknown tool: {name}"

    return [TextContent(type="text", text=result)]
