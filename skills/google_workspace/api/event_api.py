"""
Event API layer.
"""

from __future__ import annotations

from typing import Any

from ..state.store import get_client


def _require_client() -> Any:
  client = get_client()
  if not client:
    raise RuntimeError("Workspace client not initialized")
  return client


async def list_events(
  calendar_id: str,
  time_min: str | None = None,
  time_max: str | None = None,
) -> list[dict[str, Any]]:
  """List single events of one calendar ordered by start time."""
  return await _require_client().list_events(
    calendar_id=calendar_id,
    time_min=time_min,
    time_max=time_max,
  )


async def create_event(calendar_id: str, event_body: dict[str, Any]) -> dict[str, Any]:
  """Create a new event."""
  return await _require_client().insert_event(calendar_id, event_body)


async def update_event(
  calendar_id: str, event_id: str, event_body: dict[str, Any]
) -> dict[str, Any]:
  """Patch an existing event."""
  return await _require_client().patch_event(calendar_id, event_id, event_body)


async def delete_event(calendar_id: str, event_id: str) -> None:
  """Delete an event."""
  await _require_client().delete_event(calendar_id, event_id)
