"""
Workspace skill state types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..directory import CalendarDirectory
from ..timezones import TimeNormalizer


@dataclass
class WorkspaceState:
  """In-memory state for the workspace skill."""

  is_initialized: bool = False
  connection_status: str = "disconnected"  # disconnected, connected, error
  connection_error: str | None = None
  client: Any = None  # GoogleWorkspaceClient or a test double
  directory: CalendarDirectory = field(default_factory=CalendarDirectory)
  normalizer: TimeNormalizer = field(default_factory=TimeNormalizer)


def initial_state() -> WorkspaceState:
  """Create initial state."""
  return WorkspaceState()
