"""
Gmail tools (4 tools).
"""

from __future__ import annotations

from mcp.types import Tool

gmail_tools: list[Tool] = [
  Tool(
    name="list_emails",
    description="List recent emails from Gmail inbox",
    inputSchema={
      "type": "object",
      "properties": {
        "max_results": {
          "type": "number",
          "description": "Maximum number of emails to return (default: 10)",
          "default": 10,
        },
        "query": {
          "type": "string",
          "description": "Search query to filter emails",
        },
      },
    },
  ),
  Tool(
    name="search_emails",
    description="Search emails with advanced query",
    inputSchema={
      "type": "object",
      "properties": {
        "query": {
          "type": "string",
          "description": 'Gmail search query (e.g., "from:example@gmail.com has:attachment")',
        },
        "max_results": {
          "type": "number",
          "description": "Maximum number of emails to return (default: 10)",
          "default": 10,
        },
      },
      "required": ["query"],
    },
  ),
  Tool(
    name="send_email",
    description="Send a new email",
    inputSchema={
      "type": "object",
      "properties": {
        "to": {
          "type": "string",
          "description": "Recipient email address (comma-separated for several)",
        },
        "subject": {
          "type": "string",
          "description": "Email subject",
        },
        "body": {
          "type": "string",
          "description": "Email body (can include HTML)",
        },
        "cc": {
          "type": "string",
          "description": "CC recipients (comma-separated)",
        },
        "bcc": {
          "type": "string",
          "description": "BCC recipients (comma-separated)",
        },
      },
      "required": ["to", "subject", "body"],
    },
  ),
  Tool(
    name="modify_email",
    description="Modify email labels (archive, trash, mark read/unread)",
    inputSchema={
      "type": "object",
      "properties": {
        "id": {
          "type": "string",
          "description": "Email ID",
        },
        "add_labels": {
          "type": "array",
          "items": {"type": "string"},
          "description": "Label IDs to add",
        },
        "remove_labels": {
          "type": "array",
          "items": {"type": "string"},
          "description": "Label IDs to remove",
        },
      },
      "required": ["id"],
    },
  ),
]
