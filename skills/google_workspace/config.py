"""
Skill configuration: OAuth credentials and timezone settings.

Values come from an optional ``config.json`` in the data directory and from
environment variables; environment variables win.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .timezones import DEFAULT_ZONE

log = logging.getLogger("skill.google_workspace.config")

# config.json key -> environment variable
ENV_KEYS: dict[str, str] = {
  "client_id": "GOOGLE_CLIENT_ID",
  "client_secret": "GOOGLE_CLIENT_SECRET",
  "refresh_token": "GOOGLE_REFRESH_TOKEN",
  "implicit_timezone": "WORKSPACE_IMPLICIT_TIMEZONE",
  "display_timezone": "WORKSPACE_DISPLAY_TIMEZONE",
}

DATA_DIR_ENV = "WORKSPACE_DATA_DIR"


class ConfigError(Exception):
  """Raised when required configuration is missing."""

  pass


@dataclass
class WorkspaceConfig:
  client_id: str = ""
  client_secret: str = ""
  refresh_token: str = ""
  implicit_timezone: str = DEFAULT_ZONE
  display_timezone: str = DEFAULT_ZONE

  def missing_credentials(self) -> list[str]:
    return [
      ENV_KEYS[key]
      for key in ("client_id", "client_secret", "refresh_token")
      if not getattr(self, key)
    ]

  def require_credentials(self) -> None:
    missing = self.missing_credentials()
    if missing:
      raise ConfigError(
        "Required Google OAuth credentials not found: " + ", ".join(missing)
      )


def _read_config_file(data_dir: str | None) -> dict[str, Any]:
  if not data_dir:
    return {}
  config_path = Path(data_dir) / "config.json"
  if not config_path.exists():
    return {}
  try:
    data = json.loads(config_path.read_text())
  except (OSError, json.JSONDecodeError) as e:
    log.warning("Ignoring unreadable config file %s: %s", config_path, e)
    return {}
  return data if isinstance(data, dict) else {}


def load_config(
  data_dir: str | None = None,
  overrides: Mapping[str, Any] | None = None,
  environ: Mapping[str, str] | None = None,
) -> WorkspaceConfig:
  """Merge config.json, explicit overrides and environment variables."""
  env = os.environ if environ is None else environ
  data_dir = data_dir or env.get(DATA_DIR_ENV)

  values: dict[str, Any] = _read_config_file(data_dir)
  values.update({k: v for k, v in (overrides or {}).items() if v})
  for key, env_name in ENV_KEYS.items():
    if env.get(env_name):
      values[key] = env[env_name]

  config = WorkspaceConfig()
  for key in ENV_KEYS:
    if values.get(key):
      setattr(config, key, str(values[key]).strip())
  return config
