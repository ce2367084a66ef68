"""
Event management tools (4 tools).
"""

from __future__ import annotations

from mcp.types import Tool

_CALENDAR_ID = {
  "type": "string",
  "description": "Calendar ID or calendar name (default: 'primary')",
  "default": "primary",
}

_TIME_NOTE = "ISO 8601; times without a timezone are read in the configured local zone"

event_tools: list[Tool] = [
  Tool(
    name="list_events",
    description="List upcoming events across all calendars, sorted by start time",
    inputSchema={
      "type": "object",
      "properties": {
        "max_results": {
          "type": "number",
          "description": "Maximum number of events to return (default: 15)",
          "default": 15,
        },
        "time_min": {
          "type": "string",
          "description": f"Start time (default: now). {_TIME_NOTE}",
        },
        "time_max": {
          "type": "string",
          "description": f"End time. {_TIME_NOTE}",
        },
        "calendar_id": {
          "type": "string",
          "description": "Only list events of this calendar (ID or name)",
        },
      },
    },
  ),
  Tool(
    name="create_event",
    description="Create a new calendar event",
    inputSchema={
      "type": "object",
      "properties": {
        "summary": {
          "type": "string",
          "description": "Event title",
        },
        "location": {
          "type": "string",
          "description": "Event location",
        },
        "description": {
          "type": "string",
          "description": "Event description",
        },
        "start": {
          "type": "string",
          "description": f"Start time. {_TIME_NOTE}",
        },
        "end": {
          "type": "string",
          "description": f"End time. {_TIME_NOTE}",
        },
        "attendees": {
          "type": "array",
          "items": {"type": "string"},
          "description": "List of attendee email addresses",
        },
        "calendar_id": _CALENDAR_ID,
      },
      "required": ["summary", "start", "end"],
    },
  ),
  Tool(
    name="update_event",
    description="Update an existing calendar event",
    inputSchema={
      "type": "object",
      "properties": {
        "event_id": {
          "type": "string",
          "description": "Event ID to update",
        },
        "calendar_id": _CALENDAR_ID,
        "summary": {
          "type": "string",
          "description": "New event title",
        },
        "location": {
          "type": "string",
          "description": "New event location",
        },
        "description": {
          "type": "string",
          "description": "New event description",
        },
        "start": {
          "type": "string",
          "description": f"New start time. {_TIME_NOTE}",
        },
        "end": {
          "type": "string",
          "description": f"New end time. {_TIME_NOTE}",
        },
        "attendees": {
          "type": "array",
          "items": {"type": "string"},
          "description": "New list of attendee email addresses",
        },
      },
      "required": ["event_id"],
    },
  ),
  Tool(
    name="delete_event",
    description="Delete a calendar event",
    inputSchema={
      "type": "object",
      "properties": {
        "event_id": {
          "type": "string",
          "description": "Event ID to delete",
        },
        "calendar_id": {
          "type": "string",
          "description": "Calendar ID containing the event (default: 'primary')",
          "default": "primary",
        },
      },
      "required": ["event_id"],
    },
  ),
]
