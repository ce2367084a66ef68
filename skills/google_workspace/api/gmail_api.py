"""
Gmail API layer.
"""

from __future__ import annotations

import asyncio
from typing import Any

from ..state.store import get_client


def _require_client() -> Any:
  client = get_client()
  if not client:
    raise RuntimeError("Workspace client not initialized")
  return client


async def list_messages(query: str = "", max_results: int = 10) -> list[dict[str, Any]]:
  """List messages and fetch their metadata."""
  client = _require_client()
  stubs = await client.list_messages(query=query, max_results=max_results)
  return list(await asyncio.gather(*(client.get_message(stub["id"]) for stub in stubs)))


async def send_message(
  to: list[str],
  subject: str,
  body: str,
  cc: list[str] | None = None,
  bcc: list[str] | None = None,
) -> dict[str, Any]:
  """Send an email."""
  client = _require_client()
  return await client.send_message(to=to, subject=subject, body=body, cc=cc, bcc=bcc)


async def modify_message(
  message_id: str,
  add_labels: list[str] | None = None,
  remove_labels: list[str] | None = None,
) -> dict[str, Any]:
  """Change message labels."""
  client = _require_client()
  return await client.modify_message(
    message_id, add_labels=add_labels, remove_labels=remove_labels
  )
