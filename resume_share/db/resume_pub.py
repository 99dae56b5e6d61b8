"""
resume_share/db/resume_pub.py

Published resume records. Each user has at most one; it is addressed
publicly by an opaque `resume_hash` that never changes once created.
"""
from __future__ import annotations

import json
import secrets
import sqlite3
from typing import Any, Dict, Optional

from resume_share.utils.date import now_iso

GITHUB_SECTIONS = ("hotmap", "info", "repos", "course", "orgs", "languages", "commits")
DEFAULT_TEMPLATE = "v1"

# Columns a caller may change through update_pub_resume
_UPDATABLE = {
    "github": "github_json",
    "template": "template",
    "use_github": "use_github",
    "open_share": "open_share",
}

_SELECT = """
    SELECT user_id, resume_hash, github_json, template, use_github, open_share, created_at, updated_at
    FROM resume_pubs
"""


def default_github_sections() -> Dict[str, bool]:
    return {section: True for section in GITHUB_SECTIONS}


def _row_to_pub(row) -> Dict[str, Any]:
    try:
        github = json.loads(row[2]) if row[2] else {}
    except json.JSONDecodeError:
        github = {}
    return {
        "user_id": row[0],
        "resume_hash": row[1],
        "github": github,
        "template": row[3],
        "use_github": bool(row[4]),
        "open_share": bool(row[5]),
        "created_at": row[6],
        "updated_at": row[7],
    }


def get_pub_by_user(conn: sqlite3.Connection, user_id: int) -> Optional[Dict[str, Any]]:
    row = conn.execute(_SELECT + " WHERE user_id = ?", (user_id,)).fetchone()
    return _row_to_pub(row) if row else None


def get_pub_by_hash(conn: sqlite3.Connection, resume_hash: str) -> Optional[Dict[str, Any]]:
    row = conn.execute(_SELECT + " WHERE resume_hash = ?", (resume_hash,)).fetchone()
    return _row_to_pub(row) if row else None


def insert_pub_resume(conn: sqlite3.Connection, user_id: int) -> Dict[str, Any]:
    """
    Create the published record for a user with default share settings.
    If one already exists it is returned unchanged, so the hash stays stable.
    """
    now = now_iso()
    conn.execute(
        """
        INSERT OR IGNORE INTO resume_pubs
            (user_id, resume_hash, github_json, template, use_github, open_share, created_at, updated_at)
        VALUES (?, ?, ?, ?, 0, 1, ?, ?)
        """,
        (
            user_id,
            secrets.token_hex(12),
            json.dumps(default_github_sections()),
            DEFAULT_TEMPLATE,
            now,
            now,
        ),
    )
    conn.commit()
    return get_pub_by_user(conn, user_id)


def update_pub_resume(
    conn: sqlite3.Connection,
    user_id: int,
    resume_hash: str,
    fields: Dict[str, Any],
) -> bool:
    """
    Partially update a published record. Unknown field names are ignored.
    Returns True if a row was updated.
    """
    assignments = []
    params: list = []
    for name, value in fields.items():
        column = _UPDATABLE.get(name)
        if column is None:
            continue
        if column == "github_json":
            value = json.dumps(value or {})
        elif column in ("use_github", "open_share"):
            value = 1 if value else 0
        assignments.append(f"{column} = ?")
        params.append(value)

    if not assignments:
        return False

    assignments.append("updated_at = ?")
    params.append(now_iso())
    params.extend([user_id, resume_hash])

    cur = conn.execute(
        f"UPDATE resume_pubs SET {', '.join(assignments)} WHERE user_id = ? AND resume_hash = ?",
        params,
    )
    conn.commit()
    return cur.rowcount > 0
