"""
Time normalization between user-supplied date-times, UTC and the display zone.

User input without an explicit zone marker is read in the implicit zone
(UTC+9 unless configured otherwise). Calendar API timestamps are shown to the
caller in the display zone.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .validation import ValidationError

DEFAULT_ZONE = "+09:00"

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")
_ZONE_MARKERS = ("Z", "+", "-")
_DATE_ONLY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class InvalidDateFormat(ValidationError):
  """Raised when a date-time string cannot be turned into an instant."""

  def __init__(self, value: str | None = None, message: str | None = None):
    self.value = value
    super().__init__(
      message
      or 'Invalid date format. Please use a valid ISO 8601 format (e.g., "2025-03-20T10:00:00+09:00")'
    )


def parse_zone(spec: str) -> tzinfo:
  """Parse ``+HH:MM``/``-HH:MM``, ``UTC``/``Z`` or an IANA zone name."""
  spec = spec.strip()
  if spec.upper() in ("Z", "UTC"):
    return timezone.utc
  match = _OFFSET_RE.match(spec)
  if match:
    sign, hours, minutes = match.groups()
    delta = timedelta(hours=int(hours), minutes=int(minutes))
    return timezone(-delta if sign == "-" else delta)
  try:
    return ZoneInfo(spec)
  except (ZoneInfoNotFoundError, ValueError) as e:
    raise ValueError(f"Unknown timezone: {spec}") from e


def _parse(value: str) -> datetime:
  # fromisoformat only accepts a trailing "Z" from Python 3.11 on
  text = value.strip()
  if text.endswith("Z"):
    text = text[:-1] + "+00:00"
  return datetime.fromisoformat(text)


def parse_api_timestamp(value: str) -> datetime:
  """Parse a Calendar API ``dateTime`` or ``date``. Naive values are UTC."""
  try:
    dt = _parse(value)
  except (AttributeError, ValueError) as e:
    raise InvalidDateFormat(value) from e
  if dt.tzinfo is None:
    dt = dt.replace(tzinfo=timezone.utc)
  return dt


def format_display(dt: datetime) -> str:
  """Format as ``YYYY/M/D H:MM:SS``, the ja-JP locale convention."""
  return f"{dt.year}/{dt.month}/{dt.day} {dt.hour}:{dt:%M:%S}"


class TimeNormalizer:
  """Converts ambiguous local times to UTC and UTC back to the display zone."""

  def __init__(self, implicit_zone: str = DEFAULT_ZONE, display_zone: str = DEFAULT_ZONE):
    self.implicit_zone = parse_zone(implicit_zone)
    self.display_zone = parse_zone(display_zone)

  def parse_instant(self, value: str) -> datetime:
    """Parse user input into an aware datetime.

    When none of ``Z``, ``+`` or ``-`` appears in the input it is read as a
    wall-clock time in the implicit zone. Input that passes this check but
    still parses without an offset (the hyphens of a date satisfy it) is also
    placed in the implicit zone. A bare ``YYYY-MM-DD`` date is midnight UTC.
    """
    if not isinstance(value, str) or not value.strip():
      raise InvalidDateFormat(value)

    text = value.strip()
    try:
      if not any(marker in text for marker in _ZONE_MARKERS):
        dt = _parse(text).replace(tzinfo=self.implicit_zone)
      else:
        dt = _parse(text)
    except ValueError as e:
      raise InvalidDateFormat(value) from e

    if dt.tzinfo is None:
      zone = timezone.utc if _DATE_ONLY_RE.match(text) else self.implicit_zone
      dt = dt.replace(tzinfo=zone)
    return dt

  def to_utc(self, value: str) -> str:
    """Return ``value`` as an ISO-8601 UTC string ending in ``Z``."""
    dt = self.parse_instant(value).astimezone(timezone.utc)
    return dt.isoformat().replace("+00:00", "Z")

  def to_display_zone(self, value: str | None) -> str | None:
    """Format an API timestamp in the display zone. Naive values are UTC."""
    if value is None:
      return None
    return format_display(parse_api_timestamp(value).astimezone(self.display_zone))
