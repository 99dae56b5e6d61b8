"""
resume_share/db/share_analyse.py

Page-view records for published resumes and their aggregated breakdowns.
"""
from __future__ import annotations

import sqlite3
from typing import Any, Dict, List, Optional

from resume_share.utils.date import get_date, now_iso


def record_view(
    conn: sqlite3.Connection,
    *,
    url: str,
    user_id: int,
    platform: str,
    browser: str = "unknown",
    source: str = "direct",
    viewed_at: Optional[str] = None,
) -> int:
    """Store one page view. `user_id` is the owner of the viewed resume."""
    cur = conn.execute(
        """
        INSERT INTO share_views (url, user_id, platform, browser, source, viewed_at)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        (url, user_id, platform, browser, source, viewed_at or now_iso()),
    )
    conn.commit()
    return cur.lastrowid


def find_share(conn: sqlite3.Connection, *, url: str, user_id: int) -> Dict[str, List[Dict[str, Any]]]:
    """
    Aggregate views of one published URL:
      - viewDevices: [{platform, browser, count}]
      - viewSources: [{from, count}]
      - pageViews:   [{date, count}] per UTC day, in date order
    """
    devices = conn.execute(
        """
        SELECT platform, browser, COUNT(*) AS cnt
        FROM share_views
        WHERE url = ? AND user_id = ?
        GROUP BY platform, browser
        ORDER BY cnt DESC, platform, browser
        """,
        (url, user_id),
    ).fetchall()

    sources = conn.execute(
        """
        SELECT source, COUNT(*) AS cnt
        FROM share_views
        WHERE url = ? AND user_id = ?
        GROUP BY source
        ORDER BY cnt DESC, source
        """,
        (url, user_id),
    ).fetchall()

    days: Dict[str, int] = {}
    for (viewed_at,) in conn.execute(
        "SELECT viewed_at FROM share_views WHERE url = ? AND user_id = ?",
        (url, user_id),
    ):
        day = get_date(viewed_at)
        if day:
            days[day] = days.get(day, 0) + 1

    return {
        "viewDevices": [{"platform": r[0], "browser": r[1], "count": r[2]} for r in devices],
        "viewSources": [{"from": r[0], "count": r[1]} for r in sources],
        "pageViews": [{"date": day, "count": days[day]} for day in sorted(days)],
    }
