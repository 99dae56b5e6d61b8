from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def now_iso() -> str:
    """Current UTC time as an ISO-8601 string (second precision)."""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse stored timestamps. Naive values are treated as UTC.
    Returns None for empty or unparseable input.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    s = value.strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(s)
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def get_seconds(value: Optional[str]) -> int:
    """Epoch seconds of a stored timestamp; falls back to now."""
    dt = parse_timestamp(value) or datetime.now(timezone.utc)
    return int(dt.timestamp())


def get_date(value: Optional[str]) -> Optional[str]:
    """UTC calendar day (YYYY-MM-DD) of a stored timestamp."""
    dt = parse_timestamp(value)
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%d") if dt else None
