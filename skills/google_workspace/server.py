"""
MCP server + skill lifecycle hooks.

Uses the official `mcp` Python SDK. Handles tools/list, tools/call,
resources/list and prompts/list, and the skill lifecycle (load, unload).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Prompt, Resource, TextContent, Tool

from .client.google_client import GoogleWorkspaceClient
from .config import ConfigError, WorkspaceConfig, load_config
from .directory import CalendarDirectory
from .handlers import dispatch_tool
from .state.store import (
  reset_state,
  set_client,
  set_connection_error,
  set_connection_status,
  set_directory,
  set_normalizer,
)
from .timezones import TimeNormalizer
from .tools import ALL_TOOLS

log = logging.getLogger("skill.google_workspace.server")

SERVER_NAME = "google-workspace-server"

# Keeps a reference to the background directory refresh
_background_tasks: set[asyncio.Task[Any]] = set()


class ToolCallError(Exception):
  """Carries a failed tool result back through the MCP SDK."""

  pass


def create_mcp_server() -> Server:
  """Create and configure the MCP server with all tool handlers."""
  server = Server(SERVER_NAME)

  @server.list_tools()
  async def list_tools() -> list[Tool]:
    return ALL_TOOLS

  @server.call_tool()
  async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    args = arguments or {}
    result = await dispatch_tool(name, args)
    if result.is_error:
      # the SDK reports a raised exception as an isError result
      raise ToolCallError(result.content)
    return [TextContent(type="text", text=result.content)]

  @server.list_resources()
  async def list_resources() -> list[Resource]:
    return []

  @server.list_prompts()
  async def list_prompts() -> list[Prompt]:
    return []

  return server


def start_directory_refresh(directory: CalendarDirectory) -> asyncio.Task[bool]:
  """Populate the calendar directory in the background. Failures are only logged."""
  task = asyncio.create_task(directory.refresh())
  _background_tasks.add(task)
  task.add_done_callback(_background_tasks.discard)
  return task


async def on_skill_load(
  params: dict[str, Any] | None = None,
  client_factory: Any = GoogleWorkspaceClient,
) -> None:
  """Build the Workspace client from config and start warming the calendar directory."""
  params = params or {}
  config: WorkspaceConfig = load_config(params.get("dataDir"), params.get("config"))

  try:
    set_normalizer(TimeNormalizer(config.implicit_timezone, config.display_timezone))
  except ValueError as e:
    log.error("Invalid timezone setting, using defaults: %s", e)
    set_normalizer(TimeNormalizer())

  try:
    config.require_credentials()
    client = client_factory(
      client_id=config.client_id,
      client_secret=config.client_secret,
      refresh_token=config.refresh_token,
    )
  except ConfigError as e:
    log.error("%s", e)
    set_connection_error(str(e))
    return
  except Exception as e:
    log.error("Failed to initialize Google Workspace client: %s", e)
    set_connection_error(f"Failed to initialize: {e!s}")
    return

  set_client(client)
  set_connection_status("connected")
  log.info("Google Workspace client initialized")

  directory = CalendarDirectory(client)
  set_directory(directory)
  start_directory_refresh(directory)


async def on_skill_unload() -> None:
  """Clean up on skill unload."""
  for task in list(_background_tasks):
    task.cancel()
  reset_state()
  log.info("Google Workspace skill unloaded")


async def run_server(params: dict[str, Any] | None = None) -> None:
  """Run the MCP server on stdio."""
  await on_skill_load(params)
  server = create_mcp_server()
  try:
    async with stdio_server() as (read_stream, write_stream):
      log.info("Google Workspace MCP server running on stdio")
      await server.run(read_stream, write_stream, server.create_initialization_options())
  finally:
    await on_skill_unload()
