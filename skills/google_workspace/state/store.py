"""
In-process state store for the workspace skill.
"""

from __future__ import annotations

from typing import Any

from ..directory import CalendarDirectory
from ..timezones import TimeNormalizer
from .types import WorkspaceState, initial_state

_state: WorkspaceState = initial_state()


def get_state() -> WorkspaceState:
  """Get current state."""
  return _state


def get_client() -> Any:
  """Get the Workspace API client."""
  return _state.client


def set_client(client: Any) -> None:
  """Set the Workspace API client."""
  _state.client = client
  _state.is_initialized = client is not None
  if client:
    _state.connection_status = "connected"
    _state.connection_error = None
  else:
    _state.connection_status = "disconnected"


def get_directory() -> CalendarDirectory:
  return _state.directory


def set_directory(directory: CalendarDirectory) -> None:
  """Replace the calendar directory (a new snapshot owner)."""
  _state.directory = directory


def get_normalizer() -> TimeNormalizer:
  return _state.normalizer


def set_normalizer(normalizer: TimeNormalizer) -> None:
  _state.normalizer = normalizer


def set_connection_status(status: str) -> None:
  """Set connection status."""
  _state.connection_status = status
  if status != "error":
    _state.connection_error = None


def set_connection_error(error: str | None) -> None:
  """Set connection error."""
  _state.connection_error = error
  if error:
    _state.connection_status = "error"


def reset_state() -> None:
  """Reset state to initial."""
  global _state
  _state = initial_state()
