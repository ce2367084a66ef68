"""Shared fixtures: a clean state store and a fake Workspace client."""

from __future__ import annotations

import pytest

from skills.google_workspace.directory import CalendarDirectory, CalendarEntry
from skills.google_workspace.state import store
from skills.google_workspace.timezones import TimeNormalizer
from tests.fakes import CALENDARS, FakeWorkspaceClient


@pytest.fixture(autouse=True)
def clean_state():
  store.reset_state()
  yield
  store.reset_state()


@pytest.fixture
def fake_client() -> FakeWorkspaceClient:
  client = FakeWorkspaceClient()
  store.set_client(client)
  store.set_directory(
    CalendarDirectory.from_entries(
      CalendarEntry(id=cal["id"], display_name=cal["summary"]) for cal in CALENDARS
    )
  )
  store.set_normalizer(TimeNormalizer())
  return client
