"""Tests for time normalization."""

from __future__ import annotations

from datetime import timedelta, timezone

import pytest

from skills.google_workspace.timezones import (
  InvalidDateFormat,
  TimeNormalizer,
  format_display,
  parse_api_timestamp,
  parse_zone,
)
from skills.google_workspace.validation import ValidationError


@pytest.fixture
def normalizer() -> TimeNormalizer:
  return TimeNormalizer()


def test_zone_less_input_is_read_as_utc_plus_nine(normalizer):
  assert normalizer.to_utc("2025-03-20T10:00:00") == "2025-03-20T01:00:00Z"


def test_input_without_any_marker_is_read_as_utc_plus_nine(normalizer):
  # basic ISO format has no "-", so the implicit zone is attached up front
  assert normalizer.to_utc("20250320T100000") == "2025-03-20T01:00:00Z"


def test_explicit_utc_is_not_shifted(normalizer):
  assert normalizer.to_utc("2025-03-20T10:00:00Z") == "2025-03-20T10:00:00Z"


def test_explicit_offset_is_honored(normalizer):
  assert normalizer.to_utc("2025-03-20T10:00:00+09:00") == "2025-03-20T01:00:00Z"
  assert normalizer.to_utc("2025-03-20T10:00:00-05:00") == "2025-03-20T15:00:00Z"


def test_date_crossing_into_previous_day(normalizer):
  assert normalizer.to_utc("2025-03-20T05:30:00") == "2025-03-19T20:30:00Z"


def test_bare_date_input_is_midnight_utc(normalizer):
  assert normalizer.to_utc("2025-03-20") == "2025-03-20T00:00:00Z"
  assert normalizer.to_utc("2025-03-20T00:00:00") == "2025-03-19T15:00:00Z"


@pytest.mark.parametrize("value", ["not-a-date", "", "tomorrow", "2025-13-40T10:00:00"])
def test_unparseable_input_raises_invalid_date_format(normalizer, value):
  with pytest.raises(InvalidDateFormat):
    normalizer.to_utc(value)


def test_invalid_date_format_is_a_validation_error():
  assert issubclass(InvalidDateFormat, ValidationError)
  assert "ISO 8601" in str(InvalidDateFormat("x"))


def test_to_display_zone_none_passthrough(normalizer):
  assert normalizer.to_display_zone(None) is None


def test_to_display_zone_formats_in_utc_plus_nine(normalizer):
  assert normalizer.to_display_zone("2025-03-20T01:00:00Z") == "2025/3/20 10:00:00"
  assert normalizer.to_display_zone("2025-12-31T20:05:09Z") == "2026/1/1 5:05:09"


def test_to_display_zone_treats_bare_dates_as_utc(normalizer):
  assert normalizer.to_display_zone("2025-03-20") == "2025/3/20 9:00:00"


def test_to_display_zone_hour_is_not_zero_padded(normalizer):
  assert normalizer.to_display_zone("2025-03-19T16:05:09Z") == "2025/3/20 1:05:09"
  assert normalizer.to_display_zone("2025-03-19T15:00:00Z") == "2025/3/20 0:00:00"


@pytest.mark.parametrize(
  "value",
  ["2025-03-20T10:00:00", "2025-03-20T10:00:00Z", "2025-03-20T23:45:00-08:00"],
)
def test_round_trip_preserves_instant(normalizer, value):
  shown = normalizer.to_display_zone(normalizer.to_utc(value))
  assert shown == format_display(normalizer.parse_instant(value).astimezone(normalizer.display_zone))


def test_configurable_zones():
  normalizer = TimeNormalizer(implicit_zone="UTC", display_zone="-05:00")
  assert normalizer.to_utc("2025-03-20T10:00:00") == "2025-03-20T10:00:00Z"
  assert normalizer.to_display_zone("2025-03-20T10:00:00Z") == "2025/3/20 5:00:00"


def test_iana_implicit_zone_uses_offset_at_that_date():
  normalizer = TimeNormalizer(implicit_zone="America/New_York")
  assert normalizer.to_utc("20250115T120000") == "2025-01-15T17:00:00Z"
  assert normalizer.to_utc("20250715T120000") == "2025-07-15T16:00:00Z"


def test_parse_zone_forms():
  assert parse_zone("+09:00") == timezone(timedelta(hours=9))
  assert parse_zone("-0530") == timezone(-timedelta(hours=5, minutes=30))
  assert parse_zone("Z") == timezone.utc
  with pytest.raises(ValueError):
    parse_zone("Mars/Olympus_Mons")


def test_parse_api_timestamp_rejects_garbage():
  with pytest.raises(InvalidDateFormat):
    parse_api_timestamp("garbage")
