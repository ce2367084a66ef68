"""
Calendar directory: cached name -> ID index and calendar name resolution.

The index is built from the account's calendar list. Each calendar is stored
under three keys: its lower-cased name, the same without periods, and the same
without whitespace. When two calendars produce the same key the later one wins.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable

log = logging.getLogger("skill.google_workspace.directory")

_WHITESPACE_RE = re.compile(r"\s+")


class DirectoryRefreshFailed(Exception):
  """Raised when the calendar list could not be fetched."""

  pass


@dataclass(frozen=True)
class CalendarEntry:
  id: str
  display_name: str


def name_variants(name: str) -> list[str]:
  """Index keys for a calendar name, in insertion order."""
  lowered = name.lower()
  return [lowered, lowered.replace(".", ""), _WHITESPACE_RE.sub("", lowered)]


def build_index(entries: Iterable[CalendarEntry]) -> dict[str, str]:
  index: dict[str, str] = {}
  for entry in entries:
    for key in name_variants(entry.display_name):
      # an empty key would substring-match every input
      if key:
        index[key] = entry.id
  return index


class CalendarDirectory:
  """Owns the NameIndex snapshot and resolves user calendar references.

  ``refresh()`` builds a new index and swaps it in with a single assignment,
  so ``resolve()`` always reads a complete snapshot.
  """

  def __init__(self, client: Any = None, entries: Iterable[CalendarEntry] | None = None):
    self._client = client
    self._entries: tuple[CalendarEntry, ...] = tuple(entries or ())
    self._index: dict[str, str] = build_index(self._entries)

  @classmethod
  def from_entries(cls, entries: Iterable[CalendarEntry]) -> CalendarDirectory:
    """Build a directory from fixed entries, with no client attached."""
    return cls(entries=entries)

  @property
  def is_populated(self) -> bool:
    return bool(self._entries)

  def entries(self) -> list[CalendarEntry]:
    return list(self._entries)

  def index(self) -> dict[str, str]:
    """A copy of the current NameIndex."""
    return dict(self._index)

  async def _fetch_items(self) -> list[dict[str, Any]]:
    if self._client is None:
      raise DirectoryRefreshFailed("No calendar client configured")
    try:
      return await self._client.list_calendars()
    except Exception as e:
      raise DirectoryRefreshFailed(str(e)) from e

  def load(self, items: Iterable[dict[str, Any]]) -> list[CalendarEntry]:
    """Replace the snapshot with the calendars in a calendar list response."""
    entries = tuple(
      CalendarEntry(id=item["id"], display_name=item["summary"])
      for item in items
      if item.get("id") and item.get("summary")
    )
    index = build_index(entries)
    self._entries, self._index = entries, index
    log.info(
      "Available calendars: %s",
      [{"name": entry.display_name, "id": entry.id} for entry in entries],
    )
    return list(entries)

  async def refresh(self) -> bool:
    """Rebuild the index from the calendar list. Never raises.

    On failure the previous snapshot stays in place.
    """
    try:
      items = await self._fetch_items()
      try:
        self.load(items)
      except (AttributeError, KeyError, TypeError) as e:
        raise DirectoryRefreshFailed(f"Malformed calendar list: {e}") from e
    except DirectoryRefreshFailed as e:
      log.error("Failed to initialize calendar map: %s", e)
      return False

    return True

  def resolve(self, name_or_id: str) -> str:
    """Map a calendar name or ID to a calendar ID.

    Tries exact, period-stripped and whitespace-stripped lookups, then the
    first index key that contains the input or is contained in it. Unmatched
    input is returned unchanged so raw IDs and "primary" pass through.
    """
    index = self._index
    search = name_or_id.lower()

    if search in index:
      return index[search]

    no_dot = search.replace(".", "")
    if no_dot in index:
      return index[no_dot]

    no_space = _WHITESPACE_RE.sub("", search)
    if no_space in index:
      return index[no_space]

    for key, calendar_id in index.items():
      if search in key or key in search:
        return calendar_id

    return name_or_id
