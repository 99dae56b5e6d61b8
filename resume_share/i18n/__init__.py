"""
Message catalogs keyed by dotted names, e.g. "messages.share.toggleOpen".

Lookup falls back to the default locale, then to the key itself.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from resume_share.config import get_default_locale

LOCALES_DIR = Path(__file__).parent / "locales"


@lru_cache(maxsize=None)
def _load_catalog(locale: str) -> Dict[str, Any]:
    path = LOCALES_DIR / f"{locale}.json"
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def available_locales() -> list[str]:
    return sorted(p.stem for p in LOCALES_DIR.glob("*.json"))


def normalize_locale(locale: Optional[str]) -> str:
    """Map 'zh-CN' / 'en_US' style values onto an available catalog."""
    if not locale:
        return get_default_locale()
    base = locale.replace("_", "-").split("-")[0].lower()
    return base if base in available_locales() else get_default_locale()


def _lookup(catalog: Dict[str, Any], key: str) -> Optional[str]:
    node: Any = catalog
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def translate(locale: Optional[str], key: str, *args: Any) -> str:
    text = _lookup(_load_catalog(normalize_locale(locale)), key)
    if text is None:
        text = _lookup(_load_catalog(get_default_locale()), key)
    if text is None:
        return key
    if args:
        try:
            return text % args
        except (TypeError, ValueError):
            return text
    return text
