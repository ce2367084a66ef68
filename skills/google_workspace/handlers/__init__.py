"""
Tool dispatch — routes tool names to handler functions.
"""

from __future__ import annotations

import logging
from typing import Any

from ..helpers import ToolResult
from .calendar import list_calendars
from .event import create_event, delete_event, list_events, update_event
from .gmail import list_emails, modify_email, search_emails, send_email

log = logging.getLogger("skill.google_workspace.handlers")

# Map tool names to handler functions
HANDLERS: dict[str, Any] = {
  # Gmail tools
  "list_emails": list_emails,
  "search_emails": search_emails,
  "send_email": send_email,
  "modify_email": modify_email,
  # Calendar tools
  "list_calendars": list_calendars,
  # Event tools
  "list_events": list_events,
  "create_event": create_event,
  "update_event": update_event,
  "delete_event": delete_event,
}


async def dispatch_tool(tool_name: str, args: dict[str, Any]) -> ToolResult:
  """Dispatch a tool call to the appropriate handler."""
  handler = HANDLERS.get(tool_name)
  if not handler:
    log.error("Unknown tool: %s", tool_name)
    return ToolResult(content=f"Unknown tool: {tool_name}", is_error=True)

  try:
    return await handler(args)
  except Exception as e:
    log.exception("Error executing tool %s: %s", tool_name, e)
    return ToolResult(content=f"Error: {e!s}", is_error=True)
