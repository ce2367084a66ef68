"""
Input validation helpers.
"""

from __future__ import annotations

import re
from email.utils import formataddr, getaddresses
from typing import Any

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ValidationError(Exception):
  """Raised when input validation fails."""

  pass


def opt_string(args: dict, key: str, default: str | None = None) -> str | None:
  """Extract optional string from args."""
  val = args.get(key)
  if val is None:
    return default
  if isinstance(val, str):
    return val.strip() if val.strip() else default
  return str(val).strip() if str(val).strip() else default


def opt_number(args: dict, key: str, default: int | None = None) -> int | None:
  """Extract optional number from args."""
  val = args.get(key)
  if val is None:
    return default
  if isinstance(val, bool):
    return default
  if isinstance(val, (int, float)):
    return int(val)
  try:
    return int(float(str(val)))
  except (ValueError, TypeError):
    return default


def opt_string_list(args: dict, key: str) -> list[str]:
  """Extract an optional list of strings. A bare string becomes a one-item list."""
  val = args.get(key)
  if val is None:
    return []
  if isinstance(val, str):
    return [val.strip()] if val.strip() else []
  if isinstance(val, list):
    return [str(v).strip() for v in val if v is not None and str(v).strip()]
  raise ValidationError(f"Invalid {key}: must be a list of strings")


def require_string(args: dict, key: str) -> str:
  """Extract required string from args."""
  val = opt_string(args, key)
  if val is None or val == "":
    raise ValidationError(f"Missing required parameter: {key}")
  return val


def validate_email_list(value: Any, param_name: str, bare: bool = False) -> list[str]:
  """Validate a list of email addresses or a comma-separated string.

  Entries may carry a display name (``Alice <alice@example.com>``). Only the
  address part is checked. With ``bare`` the display names are dropped.
  """
  if isinstance(value, str):
    raw = [value]
  elif isinstance(value, list):
    raw = [str(p) for p in value if p]
  elif value is None:
    raw = []
  else:
    raise ValidationError(f"Invalid {param_name}: must be a list or comma-separated string")

  addresses: list[str] = []
  for item in raw:
    if "\r" in item or "\n" in item:
      raise ValidationError(f"Invalid email address in {param_name}: line breaks are not allowed")
    pairs = [(name, addr) for name, addr in getaddresses([item]) if name or addr]
    if item.strip() and not pairs:
      raise ValidationError(f"Invalid email address in {param_name}: {item.strip()}")
    for name, addr in pairs:
      if not _EMAIL_RE.match(addr):
        raise ValidationError(f"Invalid email address in {param_name}: {addr or item.strip()}")
      addresses.append(addr if bare else formataddr((name, addr)))
  return addresses
