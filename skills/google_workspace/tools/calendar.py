"""
Calendar management tools (1 tool).
"""

from __future__ import annotations

from mcp.types import Tool

calendar_tools: list[Tool] = [
  Tool(
    name="list_calendars",
    description=(
      "List all calendars in the connected account and refresh the calendar "
      "name lookup used by the event tools"
    ),
    inputSchema={
      "type": "object",
      "properties": {},
    },
  ),
]
