"""Instant parsing and rendering.

Instants are timezone-aware UTC datetimes truncated to millisecond precision.
Rendered strings follow the JavaScript ``Date.toISOString`` shape
(``2024-01-15T06:00:00.000Z``); the IST rendering is the same instant at a
fixed +05:30 offset.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

IST_OFFSET = timedelta(hours=5, minutes=30)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """Normalize datetime to UTC-aware.

    Naive datetimes are assumed to already be in UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def truncate_to_millis(dt: datetime) -> datetime:
    return dt.replace(microsecond=dt.microsecond - dt.microsecond % 1000)


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 string into a UTC instant.

    Accepts a trailing ``Z``, explicit offsets, naive timestamps and bare dates.

    Raises:
        ValueError: If the string is not a parseable ISO-8601 timestamp
    """
    text = value.strip()
    if not text:
        raise ValueError("Empty timestamp")
    if text[-1] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    return truncate_to_millis(ensure_utc(parsed))


def to_epoch_millis(dt: datetime) -> int:
    delta = ensure_utc(dt) - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def from_epoch_millis(millis: int) -> datetime:
    return _EPOCH + timedelta(milliseconds=millis)


def to_iso_utc(dt: datetime) -> str:
    return ensure_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _js_year(year: int) -> str:
    if year <= 9999:
        return f"{year:04d}"
    return f"+{year:06d}"


def to_iso_ist(dt: datetime) -> str:
    """Render the instant at +05:30.

    The last 5.5 hours of 9999-12-31 UTC fall in year 10000 at IST, which
    ``datetime`` cannot hold; those render with the extended ``+010000`` year
    the way JavaScript does.
    """
    utc = ensure_utc(dt).replace(tzinfo=None)
    try:
        local = utc + IST_OFFSET
        year, month, day = local.year, local.month, local.day
    except OverflowError:
        local = utc - timedelta(days=1) + IST_OFFSET
        year, month, day = local.year + 1, 1, 1
    clock = f"{local:%H:%M:%S}.{local.microsecond // 1000:03d}"
    return f"{_js_year(year)}-{month:02d}-{day:02d}T{clock}+05:30"


def render_instant(dt: datetime) -> dict[str, str]:
    """Render an instant as ``{"utc": ..., "ist": ...}``."""
    return {"utc": to_iso_utc(dt), "ist": to_iso_ist(dt)}
