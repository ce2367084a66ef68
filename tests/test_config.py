"""Tests for configuration loading."""

from __future__ import annotations

import json

import pytest

from skills.google_workspace.config import ConfigError, WorkspaceConfig, load_config
from skills.google_workspace.timezones import DEFAULT_ZONE

FULL_ENV = {
  "GOOGLE_CLIENT_ID": "env-id",
  "GOOGLE_CLIENT_SECRET": "env-secret",
  "GOOGLE_REFRESH_TOKEN": "env-token",
}


def test_defaults_without_any_source():
  config = load_config(environ={})
  assert config == WorkspaceConfig()
  assert config.implicit_timezone == DEFAULT_ZONE
  assert config.display_timezone == DEFAULT_ZONE


def test_environment_credentials():
  config = load_config(environ=FULL_ENV)
  assert (config.client_id, config.client_secret, config.refresh_token) == (
    "env-id",
    "env-secret",
    "env-token",
  )
  config.require_credentials()


def test_missing_credentials_are_named():
  config = load_config(environ={"GOOGLE_CLIENT_ID": "only-id"})
  assert config.missing_credentials() == ["GOOGLE_CLIENT_SECRET", "GOOGLE_REFRESH_TOKEN"]
  with pytest.raises(ConfigError, match="GOOGLE_REFRESH_TOKEN"):
    config.require_credentials()


def test_config_file_is_read_and_environment_wins(tmp_path):
  (tmp_path / "config.json").write_text(
    json.dumps(
      {
        "client_id": "file-id",
        "client_secret": "file-secret",
        "refresh_token": "file-token",
        "display_timezone": "Asia/Tokyo",
      }
    )
  )
  config = load_config(
    data_dir=str(tmp_path),
    environ={"GOOGLE_CLIENT_ID": "env-id", "WORKSPACE_IMPLICIT_TIMEZONE": "+00:00"},
  )
  assert config.client_id == "env-id"
  assert config.client_secret == "file-secret"
  assert config.display_timezone == "Asia/Tokyo"
  assert config.implicit_timezone == "+00:00"


def test_data_dir_from_environment(tmp_path):
  (tmp_path / "config.json").write_text(json.dumps({"refresh_token": "file-token"}))
  config = load_config(environ={"WORKSPACE_DATA_DIR": str(tmp_path)})
  assert config.refresh_token == "file-token"


def test_unreadable_config_file_is_ignored(tmp_path):
  (tmp_path / "config.json").write_text("{not json")
  assert load_config(data_dir=str(tmp_path), environ={}) == WorkspaceConfig()


def test_overrides_sit_between_file_and_environment(tmp_path):
  (tmp_path / "config.json").write_text(json.dumps({"client_id": "file-id"}))
  config = load_config(
    data_dir=str(tmp_path),
    overrides={"client_id": "override-id", "client_secret": "override-secret"},
    environ={"GOOGLE_CLIENT_SECRET": "env-secret"},
  )
  assert config.client_id == "override-id"
  assert config.client_secret == "env-secret"
