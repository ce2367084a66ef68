"""
Gmail tool handlers.
"""

from __future__ import annotations

from typing import Any

from ..api import gmail_api
from ..helpers import (
  ErrorCategory,
  ToolResult,
  format_email_summary,
  json_result,
  log_and_format_error,
)
from ..validation import (
  ValidationError,
  opt_number,
  opt_string,
  opt_string_list,
  require_string,
  validate_email_list,
)

DEFAULT_MAX_EMAILS = 10


async def _list(query: str, max_results: int) -> ToolResult:
  messages = await gmail_api.list_messages(query=query, max_results=max_results)
  return json_result([format_email_summary(message) for message in messages])


async def list_emails(args: dict[str, Any]) -> ToolResult:
  try:
    max_results = opt_number(args, "max_results", DEFAULT_MAX_EMAILS) or DEFAULT_MAX_EMAILS
    max_results = max(1, max_results)
    query = opt_string(args, "query") or ""
    return await _list(query, max_results)
  except Exception as e:
    return log_and_format_error("list_emails", e, ErrorCategory.GMAIL)


async def search_emails(args: dict[str, Any]) -> ToolResult:
  try:
    query = require_string(args, "query")
    max_results = opt_number(args, "max_results", DEFAULT_MAX_EMAILS) or DEFAULT_MAX_EMAILS
    max_results = max(1, max_results)
    return await _list(query, max_results)
  except Exception as e:
    return log_and_format_error("search_emails", e, ErrorCategory.GMAIL)


async def send_email(args: dict[str, Any]) -> ToolResult:
  try:
    to = validate_email_list(args.get("to"), "to")
    if not to:
      raise ValidationError("Missing required parameter: to")
    subject = require_string(args, "subject")
    body = require_string(args, "body")
    cc = validate_email_list(args.get("cc"), "cc")
    bcc = validate_email_list(args.get("bcc"), "bcc")

    result = await gmail_api.send_message(to=to, subject=subject, body=body, cc=cc, bcc=bcc)
    return ToolResult(content=f"Email sent successfully. Message ID: {result.get('id')}")
  except Exception as e:
    return log_and_format_error("send_email", e, ErrorCategory.GMAIL)


async def modify_email(args: dict[str, Any]) -> ToolResult:
  try:
    message_id = require_string(args, "id")
    add_labels = opt_string_list(args, "add_labels")
    remove_labels = opt_string_list(args, "remove_labels")

    result = await gmail_api.modify_message(
      message_id, add_labels=add_labels, remove_labels=remove_labels
    )
    return ToolResult(
      content=f"Email modified successfully. Updated labels for message ID: {result.get('id')}"
    )
  except Exception as e:
    return log_and_format_error("modify_email", e, ErrorCategory.GMAIL)
