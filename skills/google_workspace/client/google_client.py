"""
Google Workspace (Gmail + Calendar) API client.
"""

from __future__ import annotations

import base64
import logging
from email.mime.text import MIMEText
from typing import Any

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

log = logging.getLogger("skill.google_workspace.client.google")

TOKEN_URI = "https://oauth2.googleapis.com/token"


def build_raw_message(
  to: list[str],
  subject: str,
  body: str,
  cc: list[str] | None = None,
  bcc: list[str] | None = None,
) -> str:
  """Build an HTML message and return it base64url-encoded for the Gmail API."""
  message = MIMEText(body, "html", "utf-8")
  message["To"] = ", ".join(to)
  if cc:
    message["Cc"] = ", ".join(cc)
  if bcc:
    message["Bcc"] = ", ".join(bcc)
  message["Subject"] = subject
  return base64.urlsafe_b64encode(message.as_bytes()).decode("ascii").rstrip("=")


class GoogleWorkspaceClient:
  """Client for the Gmail v1 and Calendar v3 APIs, authorized by a refresh token."""

  def __init__(
    self,
    client_id: str,
    client_secret: str,
    refresh_token: str,
    credentials: Credentials | None = None,
  ):
    self.credentials = credentials or Credentials(
      token=None,
      refresh_token=refresh_token,
      client_id=client_id,
      client_secret=client_secret,
      token_uri=TOKEN_URI,
    )
    self.gmail: Any = build("gmail", "v1", credentials=self.credentials, cache_discovery=False)
    self.calendar: Any = build(
      "calendar", "v3", credentials=self.credentials, cache_discovery=False
    )

  # -------------------------------------------------------------------------
  # Gmail
  # -------------------------------------------------------------------------

  async def list_messages(self, query: str = "", max_results: int = 10) -> list[dict[str, Any]]:
    """List message stubs ({id, threadId}) matching a Gmail query."""
    try:
      result = (
        self.gmail.users()
        .messages()
        .list(userId="me", maxResults=max_results, q=query)
        .execute()
      )
      return result.get("messages", [])
    except HttpError as e:
      log.error("Failed to list messages: %s", e)
      raise

  async def get_message(self, message_id: str) -> dict[str, Any]:
    """Get message metadata headers."""
    try:
      return (
        self.gmail.users()
        .messages()
        .get(
          userId="me",
          id=message_id,
          format="metadata",
          metadataHeaders=["Subject", "From", "Date"],
        )
        .execute()
      )
    except HttpError as e:
      log.error("Failed to get message %s: %s", message_id, e)
      raise

  async def send_message(
    self,
    to: list[str],
    subject: str,
    body: str,
    cc: list[str] | None = None,
    bcc: list[str] | None = None,
  ) -> dict[str, Any]:
    """Send an HTML email."""
    raw = build_raw_message(to, subject, body, cc=cc, bcc=bcc)
    try:
      return self.gmail.users().messages().send(userId="me", body={"raw": raw}).execute()
    except HttpError as e:
      log.error("Failed to send message: %s", e)
      raise

  async def modify_message(
    self,
    message_id: str,
    add_labels: list[str] | None = None,
    remove_labels: list[str] | None = None,
  ) -> dict[str, Any]:
    """Add and remove labels on a message."""
    body = {"addLabelIds": add_labels or [], "removeLabelIds": remove_labels or []}
    try:
      return (
        self.gmail.users().messages().modify(userId="me", id=message_id, body=body).execute()
      )
    except HttpError as e:
      log.error("Failed to modify message %s: %s", message_id, e)
      raise

  # -------------------------------------------------------------------------
  # Calendar
  # -------------------------------------------------------------------------

  async def list_calendars(self) -> list[dict[str, Any]]:
    """List calendars visible to the account (first page only)."""
    try:
      result = self.calendar.calendarList().list().execute()
      return result.get("items", [])
    except HttpError as e:
      log.error("Failed to list calendars: %s", e)
      raise

  async def get_calendar(self, calendar_id: str) -> dict[str, Any]:
    """Get calendar details."""
    try:
      return self.calendar.calendars().get(calendarId=calendar_id).execute()
    except HttpError as e:
      log.error("Failed to get calendar %s: %s", calendar_id, e)
      raise

  async def list_events(
    self,
    calendar_id: str = "primary",
    time_min: str | None = None,
    time_max: str | None = None,
    max_results: int | None = None,
  ) -> list[dict[str, Any]]:
    """List single events in a calendar ordered by start time."""
    try:
      events_result = (
        self.calendar.events()
        .list(
          calendarId=calendar_id,
          timeMin=time_min,
          timeMax=time_max,
          maxResults=max_results,
          singleEvents=True,
          orderBy="startTime",
        )
        .execute()
      )
      return events_result.get("items", [])
    except HttpError as e:
      log.error("Failed to list events for %s: %s", calendar_id, e)
      raise

  async def insert_event(self, calendar_id: str, event_body: dict[str, Any]) -> dict[str, Any]:
    """Create an event and notify attendees."""
    try:
      return (
        self.calendar.events()
        .insert(calendarId=calendar_id, body=event_body, sendUpdates="all")
        .execute()
      )
    except HttpError as e:
      log.error("Failed to create event: %s", e)
      raise

  async def patch_event(
    self, calendar_id: str, event_id: str, event_body: dict[str, Any]
  ) -> dict[str, Any]:
    """Update only the given fields of an event."""
    try:
      return (
        self.calendar.events()
        .patch(calendarId=calendar_id, eventId=event_id, body=event_body)
        .execute()
      )
    except HttpError as e:
      log.error("Failed to update event %s: %s", event_id, e)
      raise

  async def delete_event(self, calendar_id: str, event_id: str) -> None:
    """Delete an event."""
    try:
      self.calendar.events().delete(calendarId=calendar_id, eventId=event_id).execute()
    except HttpError as e:
      if e.resp.status == 404:
        raise ValueError(f"Event {event_id} not found")
      log.error("Failed to delete event: %s", e)
      raise
