from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

# -------------------------
# Date helpers
# -------------------------

def parse_date(value: Any) -> Optional[datetime]:
    """
    Best-effort parse for the date strings the resume editor stores.
    Supports:
      - YYYY-MM
      - YYYY-MM-DD
      - YYYY-MM-DDTHH:MM:SS
    """
    if not isinstance(value, str):
        return None
    s = value.strip()
    if not s:
        return None

    candidates = [s, s[:19], s[:10]]
    fmts = ("%Y-%m", "%Y-%m-%d", "%Y-%m-%dT%H:%M:%S")
    for c in candidates:
        for fmt in fmts:
            try:
                return datetime.strptime(c, fmt)
            except ValueError:
                continue
    return None


def format_date_range(start: Any, end: Any, until_now: bool = False) -> str:
    """
    Output examples:
      - 'Nov 2024 – Dec 2024'
      - 'Sep 2024 – Present'
      - '' if no dates
    """
    ds = parse_date(start)
    de = None if until_now else parse_date(end)

    def fmt(d: datetime) -> str:
        return d.strftime("%b %Y")

    if ds and de:
        return f"{fmt(ds)} – {fmt(de)}"
    if ds and not de:
        return f"{fmt(ds)} – Present"
    if not ds and de:
        return fmt(de)
    return ""


# -------------------------
# Text helpers
# -------------------------

def clean_list(values: Any) -> List[str]:
    if not isinstance(values, list):
        return []
    out: List[str] = []
    for item in values:
        t = str(item).strip()
        if t.startswith(("-", "•")):
            t = t.lstrip("-•").strip()
        if t:
            out.append(t)
    return out


def escape(text: Any) -> str:
    """Escape text for ReportLab Paragraph markup."""
    s = "" if text is None else str(text)
    return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
