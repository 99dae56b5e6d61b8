"""
Shared helpers for API routes.
"""

import re
from typing import Any, Callable, Dict, List, Mapping, Optional
from urllib.parse import urlparse

from resume_share.config import get_cache_prefix
from resume_share.db.resume_pub import GITHUB_SECTIONS
from resume_share.i18n import translate

MOBILE_UA = re.compile(r"Mobi|Android|iPhone|iPad|iPod|Windows Phone|webOS|BlackBerry", re.IGNORECASE)

# Order matters: Edge and Opera also advertise Chrome, Chrome also advertises Safari
BROWSERS = (
    ("edge", re.compile(r"Edg(e|A|iOS)?/", re.IGNORECASE)),
    ("opera", re.compile(r"OPR/|Opera", re.IGNORECASE)),
    ("chrome", re.compile(r"Chrome/|CriOS/", re.IGNORECASE)),
    ("firefox", re.compile(r"Firefox/|FxiOS/", re.IGNORECASE)),
    ("safari", re.compile(r"Safari/", re.IGNORECASE)),
)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


def get_github_sections(body: Mapping[str, Any]) -> Dict[str, bool]:
    """Pick the known GitHub section flags out of a request body."""
    return {key: _as_bool(body[key]) for key in GITHUB_SECTIONS if key in body}


def get_mobile_menu(locale: str) -> List[Dict[str, str]]:
    return [
        {"id": "github", "url": "/github", "title": translate(locale, "menu.github")},
        {"id": "resume", "url": "/resume/share", "title": translate(locale, "menu.resume")},
        {"id": "analysis", "url": "/analysis", "title": translate(locale, "menu.analysis")},
        {"id": "setting", "url": "/setting", "title": translate(locale, "menu.setting")},
    ]


def is_mobile(user_agent: Optional[str]) -> bool:
    return bool(user_agent and MOBILE_UA.search(user_agent))


def detect_browser(user_agent: Optional[str]) -> str:
    if not user_agent:
        return "unknown"
    for name, pattern in BROWSERS:
        if pattern.search(user_agent):
            return name
    return "other"


def referrer_source(referer: Optional[str], own_host: Optional[str] = None) -> str:
    """Host of the referring page, or 'direct' for no/own-site referrers."""
    if not referer:
        return "direct"
    host = urlparse(referer).hostname
    if not host or (own_host and host == own_host):
        return "direct"
    return host[4:] if host.startswith("www.") else host


def make_cache_key(prefix: Optional[str] = None) -> Callable[[str], str]:
    """Return a function that namespaces cache keys, e.g. 'resume-share.resume.<hash>'."""
    prefix = prefix or get_cache_prefix()

    def cache_key(name: str) -> str:
        return f"{prefix}.{name}"

    return cache_key
