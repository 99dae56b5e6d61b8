"""
resume_share/db/resumes.py

Storage for each user's editable resume. One row per user; the content is an
arbitrary JSON object owned by the editor front end.
"""
from __future__ import annotations

import json
import logging
import sqlite3
from typing import Any, Dict, Optional

from resume_share.db.cache import hincrby
from resume_share.utils.date import now_iso

logger = logging.getLogger(__name__)


def get_resume(conn: sqlite3.Connection, user_id: int) -> Optional[Dict[str, Any]]:
    """
    Return the stored resume content for a user, or None if they never saved one.
    """
    row = conn.execute(
        "SELECT resume_json FROM resumes WHERE user_id = ?",
        (user_id,),
    ).fetchone()
    if not row:
        return None
    try:
        content = json.loads(row[0])
    except json.JSONDecodeError:
        logger.error(f"Corrupt resume_json for user {user_id}")
        return None
    return content if isinstance(content, dict) else None


def get_resume_updated_at(conn: sqlite3.Connection, user_id: int) -> Optional[str]:
    row = conn.execute(
        "SELECT updated_at FROM resumes WHERE user_id = ?",
        (user_id,),
    ).fetchone()
    return row[0] if row else None


def update_resume(
    conn: sqlite3.Connection,
    user_id: int,
    content: Optional[Dict[str, Any]],
) -> bool:
    """
    Create or replace a user's resume. Returns False when there is nothing to save.

    The first save for a user also bumps the `resume/count` counter.
    """
    if not isinstance(content, dict):
        return False

    now = now_iso()
    exists = conn.execute(
        "SELECT 1 FROM resumes WHERE user_id = ?",
        (user_id,),
    ).fetchone()

    if exists:
        conn.execute(
            "UPDATE resumes SET resume_json = ?, updated_at = ? WHERE user_id = ?",
            (json.dumps(content), now, user_id),
        )
        conn.commit()
        return True

    conn.execute(
        """
        INSERT INTO resumes (user_id, resume_json, created_at, updated_at)
        VALUES (?, ?, ?, ?)
        """,
        (user_id, json.dumps(content), now, now),
    )
    conn.commit()
    hincrby("resume", "count", 1)
    return True
