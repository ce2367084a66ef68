"""Tests for the calendar directory and name resolution."""

from __future__ import annotations

from skills.google_workspace.directory import (
  CalendarDirectory,
  CalendarEntry,
  build_index,
  name_variants,
)
from tests.fakes import CALENDARS, FakeWorkspaceClient, build_http_error


def _directory(*pairs: tuple[str, str]) -> CalendarDirectory:
  return CalendarDirectory.from_entries(CalendarEntry(id=i, display_name=n) for i, n in pairs)


def test_name_variants_lowercase_no_dots_no_spaces():
  assert name_variants("Team.Sync Room") == ["team.sync room", "teamsync room", "team.syncroom"]


def test_build_index_last_write_wins_on_collision():
  index = build_index(
    [
      CalendarEntry(id="first", display_name="Team"),
      CalendarEntry(id="second", display_name="team"),
    ]
  )
  assert index["team"] == "second"


def test_build_index_skips_empty_keys():
  index = build_index([CalendarEntry(id="blank", display_name=" . ")])
  assert "" not in index


async def test_refresh_populates_index_and_resolves_every_name():
  client = FakeWorkspaceClient()
  directory = CalendarDirectory(client)
  assert not directory.is_populated

  assert await directory.refresh() is True

  assert directory.is_populated
  for cal in CALENDARS:
    assert directory.resolve(cal["summary"]) == cal["id"]
    assert directory.resolve(cal["summary"].upper()) == cal["id"]


async def test_refresh_skips_items_without_id_or_summary():
  client = FakeWorkspaceClient(
    calendars=[
      {"id": "only-id"},
      {"summary": "Only Name"},
      {"id": "ok-id", "summary": "Ok"},
    ]
  )
  directory = CalendarDirectory(client)
  await directory.refresh()

  assert directory.entries() == [CalendarEntry(id="ok-id", display_name="Ok")]


async def test_failed_first_refresh_leaves_index_empty():
  client = FakeWorkspaceClient()
  client.list_calendars_error = build_http_error(401, "Unauthorized")
  directory = CalendarDirectory(client)

  assert await directory.refresh() is False
  assert directory.index() == {}
  assert directory.resolve("Work") == "Work"


async def test_failed_refresh_keeps_previous_snapshot():
  client = FakeWorkspaceClient()
  directory = CalendarDirectory(client)
  await directory.refresh()
  before = directory.index()

  client.list_calendars_error = ConnectionError("network down")
  assert await directory.refresh() is False
  assert directory.index() == before


async def test_refresh_without_client_does_not_raise():
  assert await CalendarDirectory().refresh() is False


async def test_refresh_replaces_index_wholesale():
  client = FakeWorkspaceClient(calendars=[{"id": "old", "summary": "Old"}])
  directory = CalendarDirectory(client)
  await directory.refresh()

  client.calendars = [{"id": "new", "summary": "New"}]
  await directory.refresh()

  assert directory.resolve("Old") == "Old"
  assert directory.resolve("New") == "new"


def test_resolve_matches_dotted_name():
  directory = _directory(("dotted", "my.calendar"))
  # "my calendar" misses every exact key; its space-stripped form hits "mycalendar"
  assert directory.resolve("My Calendar") == "dotted"
  assert directory.resolve("My.Calendar") == "dotted"
  assert directory.resolve("mycalendar") == "dotted"


def test_resolve_whitespace_stripped_match():
  directory = _directory(("spaced", "My  Calendar"))
  assert directory.resolve("My Calendar") == "spaced"
  assert directory.resolve("MyCalendar") == "spaced"


def test_resolve_substring_match_either_direction():
  directory = _directory(("family", "Family"))
  assert directory.resolve("fam") == "family"
  assert directory.resolve("family events") == "family"


def test_resolve_substring_first_key_in_insertion_order_wins():
  directory = _directory(("a", "Project Alpha"), ("b", "Project Beta"))
  assert directory.resolve("project") == "a"


def test_resolve_exact_beats_substring():
  directory = _directory(("broad", "Work Stuff"), ("exact", "Work"))
  assert directory.resolve("work") == "exact"


def test_resolve_unmatched_input_passes_through_unchanged():
  directory = _directory(("work", "Work"))
  assert directory.resolve("nonexistent-id-123") == "nonexistent-id-123"
  assert directory.resolve("primary") == "primary"
  assert directory.resolve("Some.Raw@group.calendar.google.com") == (
    "Some.Raw@group.calendar.google.com"
  )


def test_resolve_on_empty_directory_passes_through():
  assert CalendarDirectory().resolve("Anything") == "Anything"


async def test_refresh_with_malformed_calendar_list_keeps_snapshot():
  client = FakeWorkspaceClient()
  directory = CalendarDirectory(client)
  await directory.refresh()
  before = directory.index()

  client.calendars = [{"id": "x", "summary": 123}]
  assert await directory.refresh() is False
  assert directory.index() == before
