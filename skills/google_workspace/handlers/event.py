"""
Event management tool handlers.

Calendar names are resolved through the calendar directory and start/end
times are normalized to UTC before anything is written.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from googleapiclient.errors import HttpError

from ..api import calendar_api, event_api
from ..helpers import ErrorCategory, ToolResult, json_result, log_and_format_error
from ..state.store import get_normalizer
from ..timezones import InvalidDateFormat, TimeNormalizer, parse_api_timestamp
from ..validation import (
  ValidationError,
  opt_number,
  opt_string,
  require_string,
  validate_email_list,
)

DEFAULT_MAX_EVENTS = 15


def _utc_time(utc: str) -> dict[str, str]:
  return {"dateTime": utc, "timeZone": "UTC"}


def _check_order(normalizer: TimeNormalizer, start: str, end: str) -> None:
  if normalizer.parse_instant(end) <= normalizer.parse_instant(start):
    raise InvalidDateFormat(end, "End time must be after start time")


def _times(normalizer: TimeNormalizer, when: dict[str, Any] | None) -> dict[str, str | None]:
  date_time = (when or {}).get("dateTime")
  return {
    "utc": normalizer.to_utc(date_time) if date_time else None,
    "display": normalizer.to_display_zone(date_time),
  }


def _with_display(normalizer: TimeNormalizer, when: dict[str, Any] | None) -> dict[str, Any]:
  when = dict(when or {})
  when["display"] = normalizer.to_display_zone(when.get("dateTime") or when.get("date"))
  return when


def _start_instant(event: dict[str, Any]) -> datetime:
  start = event.get("start", {})
  value = start.get("dateTime") or start.get("date")
  if not value:
    return datetime.max.replace(tzinfo=timezone.utc)
  return parse_api_timestamp(value)


async def list_events(args: dict[str, Any]) -> ToolResult:
  try:
    normalizer = get_normalizer()
    max_results = opt_number(args, "max_results", DEFAULT_MAX_EVENTS) or DEFAULT_MAX_EVENTS
    max_results = max(1, max_results)
    time_min_arg = opt_string(args, "time_min")
    time_max_arg = opt_string(args, "time_max")
    time_min = (
      normalizer.to_utc(time_min_arg)
      if time_min_arg
      else datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    )
    time_max = normalizer.to_utc(time_max_arg) if time_max_arg else None

    calendar_arg = opt_string(args, "calendar_id")
    if calendar_arg:
      calendar_ids = [calendar_api.resolve_calendar_id(calendar_arg)]
    else:
      calendar_ids = [cal["id"] for cal in await calendar_api.list_calendars() if cal.get("id")]

    dated: list[tuple[datetime, dict[str, Any]]] = []
    for calendar_id in calendar_ids:
      events = await event_api.list_events(calendar_id, time_min=time_min, time_max=time_max)
      for event in events:
        dated.append(
          (
            _start_instant(event),
            {
              "calendarId": calendar_id,
              "id": event.get("id"),
              "summary": event.get("summary"),
              "start": _with_display(normalizer, event.get("start")),
              "end": _with_display(normalizer, event.get("end")),
              "location": event.get("location"),
            },
          )
        )

    dated.sort(key=lambda pair: pair[0])
    return json_result([entry for _, entry in dated[:max_results]])
  except Exception as e:
    return log_and_format_error("list_events", e, ErrorCategory.EVENT)


async def create_event(args: dict[str, Any]) -> ToolResult:
  try:
    normalizer = get_normalizer()
    summary = require_string(args, "summary")
    start = require_string(args, "start")
    end = require_string(args, "end")
    location = opt_string(args, "location")
    description = opt_string(args, "description")
    attendees = validate_email_list(args.get("attendees"), "attendees", bare=True)
    calendar_arg = opt_string(args, "calendar_id") or "primary"

    _check_order(normalizer, start, end)
    event_body: dict[str, Any] = {
      "summary": summary,
      "start": _utc_time(normalizer.to_utc(start)),
      "end": _utc_time(normalizer.to_utc(end)),
    }
    if location:
      event_body["location"] = location
    if description:
      event_body["description"] = description
    if attendees:
      event_body["attendees"] = [{"email": email} for email in attendees]

    calendar_id = calendar_api.resolve_calendar_id(calendar_arg)
    try:
      await calendar_api.get_calendar(calendar_id)
    except HttpError as e:
      raise ValidationError(f"Invalid calendar ID or name: {calendar_arg}") from e

    event = await event_api.create_event(calendar_id, event_body)
    return json_result(
      {
        "success": True,
        "eventId": event.get("id"),
        "htmlLink": event.get("htmlLink"),
        "calendarId": calendar_id,
        "start": _times(normalizer, event.get("start")),
        "end": _times(normalizer, event.get("end")),
      }
    )
  except Exception as e:
    return log_and_format_error("create_event", e, ErrorCategory.EVENT)


async def update_event(args: dict[str, Any]) -> ToolResult:
  try:
    normalizer = get_normalizer()
    event_id = require_string(args, "event_id")
    calendar_arg = opt_string(args, "calendar_id") or "primary"
    start = opt_string(args, "start")
    end = opt_string(args, "end")

    event_body: dict[str, Any] = {}
    for key in ("summary", "location", "description"):
      value = opt_string(args, key)
      if value:
        event_body[key] = value
    if start:
      event_body["start"] = _utc_time(normalizer.to_utc(start))
    if end:
      event_body["end"] = _utc_time(normalizer.to_utc(end))
    if start and end:
      _check_order(normalizer, start, end)
    if args.get("attendees") is not None:
      attendees = validate_email_list(args.get("attendees"), "attendees", bare=True)
      event_body["attendees"] = [{"email": email} for email in attendees]

    calendar_id = calendar_api.resolve_calendar_id(calendar_arg)
    event = await event_api.update_event(calendar_id, event_id, event_body)
    return json_result(
      {
        "success": True,
        "message": f"Event updated successfully in calendar {calendar_id}.",
        "eventId": event.get("id"),
        "calendarId": calendar_id,
        "start": _times(normalizer, event.get("start")),
        "end": _times(normalizer, event.get("end")),
      }
    )
  except Exception as e:
    return log_and_format_error("update_event", e, ErrorCategory.EVENT)


async def delete_event(args: dict[str, Any]) -> ToolResult:
  try:
    event_id = require_string(args, "event_id")
    calendar_id = opt_string(args, "calendar_id") or "primary"

    await event_api.delete_event(calendar_id, event_id)
    return ToolResult(
      content=f"Event deleted successfully from calendar {calendar_id}. Event ID: {event_id}"
    )
  except ValidationError as e:
    return log_and_format_error("delete_event", e, ErrorCategory.EVENT)
  except ValueError as e:
    return ToolResult(content=str(e), is_error=True)
  except Exception as e:
    return log_and_format_error("delete_event", e, ErrorCategory.EVENT)
