"""
Calendar management tool handlers.
"""

from __future__ import annotations

from typing import Any

from ..api import calendar_api
from ..helpers import ErrorCategory, ToolResult, format_calendar, log_and_format_error


async def list_calendars(args: dict[str, Any]) -> ToolResult:
  try:
    calendars = await calendar_api.list_calendars()
    calendar_api.rebuild_directory(calendars)
    if not calendars:
      return ToolResult(content="No calendars found.")

    lines = [format_calendar(cal) for cal in calendars]
    header = f"Calendars ({len(calendars)}):\n"
    return ToolResult(content=header + "\n".join(lines))
  except Exception as e:
    return log_and_format_error("list_calendars", e, ErrorCategory.CALENDAR)
