import sys
import os
import pytest

# Add the project root directory to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import fakeredis

import resume_share.db as db
from resume_share.db import cache


@pytest.fixture(autouse=True)
def shared_db(tmp_path, monkeypatch):
    """
    Point APP_DB_PATH at a temporary on-disk DB and create the schema.
    App code and tests open their own connections to the same file.
    """
    db_path = tmp_path / "test.db"
    monkeypatch.setenv("APP_DB_PATH", str(db_path))
    monkeypatch.setenv("DOWNLOAD_DIR", str(tmp_path / "downloads"))
    for name in ("SLACK_WEBHOOK_URL", "APP_URL", "CACHE_PREFIX", "DEFAULT_LOCALE"):
        monkeypatch.delenv(name, raising=False)

    conn = db.connect()
    db.init_schema(conn)
    conn.close()

    yield db_path


@pytest.fixture
def conn(shared_db):
    """A connection to the test DB for seeding and direct data-access tests."""
    c = db.connect()
    yield c
    c.close()


@pytest.fixture
def test_user_id(conn):
    return db.get_or_create_user(conn, "octocat", name="The Octocat")


@pytest.fixture(autouse=True)
def redis_client(monkeypatch):
    """In-memory Redis for the cache module, fresh for every test."""
    client = fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)
    monkeypatch.setattr(cache, "_redis_client", lambda: client)
    yield client
