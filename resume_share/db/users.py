"""
resume_share/db/users.py

Handles all database operations related to users:
 - Creating new users
 - Fetching existing users by id or GitHub login
"""

import sqlite3
from typing import Any, Dict, Optional


def _row_to_user(row) -> Dict[str, Any]:
    return {
        "user_id": row[0],
        "github_login": row[1],
        "name": row[2],
        "email": row[3],
    }


def get_user_by_id(conn: sqlite3.Connection, user_id: int) -> Optional[Dict[str, Any]]:
    row = conn.execute(
        "SELECT user_id, github_login, name, email FROM users WHERE user_id = ?",
        (user_id,),
    ).fetchone()
    return _row_to_user(row) if row else None


def get_user_by_login(conn: sqlite3.Connection, github_login: str) -> Optional[Dict[str, Any]]:
    """Case-insensitive lookup."""
    row = conn.execute(
        "SELECT user_id, github_login, name, email FROM users WHERE LOWER(github_login) = LOWER(?)",
        (github_login.strip(),),
    ).fetchone()
    return _row_to_user(row) if row else None


def get_or_create_user(
    conn: sqlite3.Connection,
    github_login: str,
    name: Optional[str] = None,
    email: Optional[str] = None,
) -> int:
    """Return existing user_id or create new user."""
    existing = get_user_by_login(conn, github_login)
    if existing:
        return existing["user_id"]
    cur = conn.execute(
        "INSERT INTO users (github_login, name, email) VALUES (?, ?, ?)",
        (github_login.strip(), name, email),
    )
    conn.commit()
    return cur.lastrowid
