"""Parse ISO-8601 offset timestamps and render them for itineraries."""

from datetime import datetime, timedelta
from typing import Optional

MAX_OFFSET = timedelta(hours=18)

# Fixed English abbreviations so output does not follow the process locale
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def parse_offset_datetime(value: str) -> Optional[datetime]:
    """
    Parse an extended ISO-8601 date-time with a UTC offset (e.g. 2024-03-05T10:30:00-05:00).

    Returns None for anything else: naive or date-only values, other
    separators than T, impossible dates, offsets beyond +/-18:00.
    """
    iso = value.upper()
    if len(iso) < 11 or iso[10] != "T":
        return None
    try:
        dt = datetime.fromisoformat(iso.replace("Z", "+00:00"))
    except ValueError:
        return None
    offset = dt.utcoffset()
    if offset is None or abs(offset) > MAX_OFFSET:
        return None
    return dt


def format_offset(dt: datetime) -> str:
    """Render the UTC offset as +HH:MM (seconds dropped)."""
    delta = dt.utcoffset() or timedelta(0)
    total = int(delta.total_seconds())
    sign = "-" if total < 0 else "+"
    total = abs(total)
    return f"{sign}{total // 3600:02d}:{total % 3600 // 60:02d}"


def format_date(dt: datetime) -> str:
    """e.g. 05 Mar 2024"""
    return f"{dt.day:02d} {_MONTHS[dt.month - 1]} {dt.year:04d}"


def format_time_12(dt: datetime) -> str:
    """e.g. 10:30am (-05:00)"""
    hour = dt.hour % 12 or 12
    suffix = "am" if dt.hour < 12 else "pm"
    return f"{hour:02d}:{dt.minute:02d}{suffix} ({format_offset(dt)})"


def format_time_24(dt: datetime) -> str:
    """e.g. 10:30 (+00:00)"""
    return f"{dt.hour:02d}:{dt.minute:02d} ({format_offset(dt)})"
