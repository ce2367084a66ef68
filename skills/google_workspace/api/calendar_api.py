"""
Calendar API layer.
"""

from __future__ import annotations

from typing import Any

from ..state.store import get_client, get_directory


def _require_client() -> Any:
  client = get_client()
  if not client:
    raise RuntimeError("Workspace client not initialized")
  return client


async def list_calendars() -> list[dict[str, Any]]:
  """List all calendars in the account."""
  return await _require_client().list_calendars()


async def get_calendar(calendar_id: str) -> dict[str, Any]:
  """Get calendar details."""
  return await _require_client().get_calendar(calendar_id)


def rebuild_directory(calendars: list[dict[str, Any]]) -> None:
  """Rebuild the calendar name index from a calendar list response."""
  get_directory().load(calendars)


def resolve_calendar_id(name_or_id: str) -> str:
  """Map a calendar name or ID to an ID using the current directory."""
  return get_directory().resolve(name_or_id)
