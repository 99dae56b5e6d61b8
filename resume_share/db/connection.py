"""
resume_share/db/connection.py

Handles database connection setup and schema initialization.
Responsible for:
 - Creating SQLite connections
 - Loading and executing schema definitions from tables.sql
"""

import logging
import sqlite3
from pathlib import Path
import os

logger = logging.getLogger(__name__)


def connect(db_path: str | Path | None = None) -> sqlite3.Connection:
    target = str(db_path) if db_path is not None else os.getenv("APP_DB_PATH", "local_storage.db")
    if target != ":memory:":
        Path(target).parent.mkdir(parents=True, exist_ok=True)

    # FastAPI may run a sync dependency's setup and teardown on different threadpool workers
    conn = sqlite3.connect(target, check_same_thread=False)
    conn.execute("PRAGMA foreign_keys=ON;")
    if target != ":memory:":
        conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    return conn


def init_schema(conn: sqlite3.Connection) -> None:
    """Create all tables and indexes if they don't exist."""
    schema_path = Path(__file__).parent / "schema" / "tables.sql"
    with open(schema_path, "r", encoding="utf-8") as f:
        schema_sql = f.read()

    conn.executescript(schema_sql)
    conn.commit()
    logger.debug("Initialized database schema from %s", schema_path)
