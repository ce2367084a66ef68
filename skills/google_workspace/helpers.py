"""
Shared formatting and error handling helpers.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from googleapiclient.errors import HttpError

from .validation import ValidationError

log = logging.getLogger("skill.google_workspace.helpers")


# ---------------------------------------------------------------------------
# Tool result
# ---------------------------------------------------------------------------


@dataclass
class ToolResult:
  content: str
  is_error: bool = False


def json_result(payload: Any) -> ToolResult:
  """Wrap a JSON-serialisable payload as pretty-printed text."""
  return ToolResult(content=json.dumps(payload, indent=2, ensure_ascii=False))


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def header_value(message: dict[str, Any], name: str) -> str:
  """Return the first header called ``name`` from a Gmail message, or ''."""
  headers = message.get("payload", {}).get("headers", []) or []
  for header in headers:
    if header.get("name") == name:
      return header.get("value", "")
  return ""


def format_email_summary(message: dict[str, Any]) -> dict[str, Any]:
  return {
    "id": message.get("id"),
    "subject": header_value(message, "Subject"),
    "from": header_value(message, "From"),
    "date": header_value(message, "Date"),
  }


def format_calendar(calendar: dict[str, Any]) -> str:
  """Format calendar info."""
  name = calendar.get("summary", calendar.get("id", "Unknown"))
  tz_str = f" [{calendar['timeZone']}]" if calendar.get("timeZone") else ""
  primary = " [PRIMARY]" if calendar.get("primary", False) else ""
  return f"{name} ({calendar.get('id', 'unknown')}){tz_str}{primary}"


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class ErrorCategory(str, Enum):
  GMAIL = "GMAIL"
  CALENDAR = "CALENDAR"
  EVENT = "EVENT"
  AUTH = "AUTH"
  VALIDATION = "VALIDATION"
  API = "API"


def error_code(function_name: str, category: str | ErrorCategory | None = None) -> str:
  prefix = category.value if isinstance(category, ErrorCategory) else (category or "GEN")
  hash_val = sum(ord(c) for c in function_name) % 1000
  return f"{prefix}-ERR-{hash_val:03d}"


def log_and_format_error(
  function_name: str,
  error: Exception,
  category: str | ErrorCategory | None = None,
) -> ToolResult:
  code = error_code(function_name, category)

  if isinstance(error, ValidationError):
    log.warning("[MCP] Invalid input for %s: %s", function_name, error)
    return ToolResult(content=str(error), is_error=True)

  log.error("[MCP] Error in %s - Code: %s - %s", function_name, code, error)

  if isinstance(error, HttpError):
    status = getattr(error.resp, "status", "unknown")
    reason = getattr(error.resp, "reason", "") or str(error)
    user_message = f"Google API error {status} in {function_name} (code: {code}): {reason}"
  else:
    user_message = f"An error occurred (code: {code}). Check logs for details."

  return ToolResult(content=user_message, is_error=True)
