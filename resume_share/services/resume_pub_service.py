"""
Lookups over published resumes, returned as StoreResult envelopes so route
handlers can pass the not-found message straight through to the client.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from resume_share.db.resume_pub import get_pub_by_hash, get_pub_by_user, insert_pub_resume
from resume_share.db.resumes import get_resume, get_resume_updated_at
from resume_share.db.users import get_user_by_id

PUB_NOT_FOUND = "Published resume not found"
SHARE_CLOSED = "Resume sharing is closed"


@dataclass
class StoreResult:
    success: bool
    result: Optional[Dict[str, Any]] = None
    message: Optional[str] = None


def find_public_resume(
    conn,
    *,
    user_id: Optional[int] = None,
    resume_hash: Optional[str] = None,
) -> StoreResult:
    """Find a published record by owner or by public hash."""
    if user_id is not None:
        record = get_pub_by_user(conn, user_id)
    elif resume_hash:
        record = get_pub_by_hash(conn, resume_hash)
    else:
        record = None

    if record is None:
        return StoreResult(success=False, message=PUB_NOT_FOUND)
    return StoreResult(success=True, result=record)


def add_pub_resume(conn, user_id: int) -> StoreResult:
    record = insert_pub_resume(conn, user_id)
    if record is None:
        return StoreResult(success=False, message=PUB_NOT_FOUND)
    return StoreResult(success=True, result=record)


def get_update_time(conn, resume_hash: str) -> StoreResult:
    """Last time the resume behind a published hash was saved."""
    record = get_pub_by_hash(conn, resume_hash)
    if record is None:
        return StoreResult(success=False, message=PUB_NOT_FOUND)
    updated_at = get_resume_updated_at(conn, record["user_id"]) or record["updated_at"]
    return StoreResult(success=True, result={"updated_at": updated_at, "user_id": record["user_id"]})


def get_pub_resume(conn, resume_hash: str) -> StoreResult:
    """
    Public resume content for a hash. Fails if the hash is unknown or the
    owner has closed sharing.
    """
    record = get_pub_by_hash(conn, resume_hash)
    if record is None:
        return StoreResult(success=False, message=PUB_NOT_FOUND)
    if not record["open_share"]:
        return StoreResult(success=False, message=SHARE_CLOSED)

    user = get_user_by_id(conn, record["user_id"]) or {}
    return StoreResult(
        success=True,
        result={
            "resume": get_resume(conn, record["user_id"]) or {},
            "github": record["github"],
            "template": record["template"],
            "use_github": record["use_github"],
            "open_share": record["open_share"],
            "github_login": user.get("github_login"),
            "updated_at": record["updated_at"],
        },
    )
