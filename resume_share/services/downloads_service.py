"""
PDF downloads of a user's resume. Files are written under DOWNLOAD_DIR and
served by the app's `/downloads` static mount.
"""

import logging
import re
from typing import Any, Dict

from resume_share.config import get_app_url, get_download_dir
from resume_share.export.resume_pdf import export_resume_to_pdf

logger = logging.getLogger(__name__)


def _safe_segment(s: str) -> str:
    s = re.sub(r"[^A-Za-z0-9_.-]+", "_", (s or "").strip())
    return s.strip("._") or "user"


def resume(
    content: Dict[str, Any],
    *,
    source_url: str,
    folder: str,
    title: str,
) -> str:
    """Render resume `content` to DOWNLOAD_DIR/<folder>/<title> and return its public URL."""
    folder = _safe_segment(folder)
    title = _safe_segment(title)
    out_path = get_download_dir() / folder / title

    export_resume_to_pdf(
        resume=content,
        out_path=out_path,
        author=folder,
        source_url=source_url,
    )
    logger.info(f"[DOWNLOADS:RESUME][{out_path}]")
    return f"{get_app_url()}/downloads/{folder}/{title}"
