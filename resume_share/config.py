"""
resume_share/config.py

Environment-backed settings. Values are read at call time so tests can
monkeypatch the environment per test.
"""

import os
from pathlib import Path


def get_app_url() -> str:
    return os.getenv("APP_URL", "http://localhost:8000").rstrip("/")


def get_session_secret() -> str:
    return os.getenv("SESSION_SECRET") or "dev-only-session-secret-change-me"


def get_slack_webhook_url() -> str | None:
    return os.getenv("SLACK_WEBHOOK_URL") or None


def get_download_dir() -> Path:
    return Path(os.getenv("DOWNLOAD_DIR", "downloads"))


def get_cache_prefix() -> str:
    return os.getenv("CACHE_PREFIX", "resume-share")


def get_default_locale() -> str:
    return os.getenv("DEFAULT_LOCALE", "en")


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_redis_url() -> str:
    return (os.getenv("REDIS_URL") or "").strip() or "redis://localhost:6379/0"
