"""Shared utilities for timestamp parsing and duration resolution."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo
from fractions import Fraction
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import ConfigError, InvalidDurationError, InvalidTimestampError

_MINUTE = timedelta(minutes=1)
_MICROSECOND = timedelta(microseconds=1)
_HALF = Fraction(1, 2)


def load_zone(name: str) -> ZoneInfo:
    if not isinstance(name, str) or not name:
        raise ConfigError("Zone name must be a non-empty string.")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigError(f"Timezone data for {name} is unavailable.") from exc


def parse_timestamp(value: str, zone: tzinfo) -> datetime:
    """Parse an ISO 8601 value and express it in ``zone``.

    Values without an offset are read as wall-clock time in ``zone``. A wall-clock
    time repeated by a fall-back transition resolves to its first occurrence.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidTimestampError("Timestamp must be a non-empty string.")
    raw = value.strip()
    if raw.endswith(("Z", "z")):
        raw = f"{raw[:-1]}+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise InvalidTimestampError(f"Timestamp {value!r} is not a valid ISO 8601 value.") from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=zone)
    try:
        return parsed.astimezone(zone)
    except OverflowError as exc:
        raise InvalidTimestampError(f"Timestamp {value!r} is out of range.") from exc


def round_half_away_from_zero(value: Fraction) -> int:
    magnitude = abs(value)
    whole = int(magnitude)
    if magnitude - whole >= _HALF:
        whole += 1
    return whole if value >= 0 else -whole


def duration_in_minutes(start: datetime, end: datetime) -> int:
    # Same-zone aware datetimes subtract by wall clock; compare UTC instants instead.
    try:
        elapsed = end.astimezone(UTC) - start.astimezone(UTC)
    except OverflowError as exc:
        raise InvalidTimestampError("Timestamp is out of range.") from exc
    return round_half_away_from_zero(Fraction(elapsed // _MICROSECOND, _MINUTE // _MICROSECOND))


def resolve_duration_minutes(start_at: str, end_at: str, *, zone: tzinfo) -> int:
    """Return the whole minutes between two timestamps, rejecting non-positive spans."""
    start = parse_timestamp(start_at, zone)
    end = parse_timestamp(end_at, zone)
    minutes = duration_in_minutes(start, end)
    if minutes <= 0:
        raise InvalidDurationError("end_at must be after start_at.")
    return minutes
