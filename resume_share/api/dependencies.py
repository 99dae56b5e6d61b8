from dataclasses import dataclass
from typing import Generator, Optional
from sqlite3 import Connection
import os
import jwt

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from resume_share.db import connect, init_schema
from resume_share.db.users import get_user_by_id
from resume_share.api.security import decode_access_token
from resume_share.i18n import normalize_locale


def get_db() -> Generator[Connection, None, None]:
    conn = connect()
    init_schema(conn)  # ensure tables exist for API requests
    try:
        yield conn
    finally:
        conn.close()


bearer_scheme = HTTPBearer(auto_error=False)


def get_jwt_secret() -> str:
    secret = os.getenv("JWT_SECRET")
    if not secret:
        raise RuntimeError("JWT_SECRET is not set")
    return secret


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    conn: Connection = Depends(get_db),
) -> Optional[dict]:
    """Resolve the bearer token if one was sent. Anonymous requests get None."""
    if credentials is None:
        return None

    try:
        payload = decode_access_token(secret=get_jwt_secret(), token=credentials.credentials)
        user_id = int(payload["sub"])
    except (KeyError, ValueError, jwt.PyJWTError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        )

    user = get_user_by_id(conn, user_id)
    if not user:
        raise HTTPException(status_code=401, detail="User not found")

    return {"id": user["user_id"], "github_login": user["github_login"]}


def get_current_user(current_user: Optional[dict] = Depends(get_optional_user)) -> dict:
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return current_user


@dataclass
class Session:
    user_id: Optional[int]
    github_login: Optional[str]
    locale: str
    from_download: bool = False


def get_session(
    request: Request,
    current_user: Optional[dict] = Depends(get_optional_user),
) -> Session:
    """
    Per-request session view: identity from the bearer token, locale and the
    from_download flag from the signed session cookie. `?locale=` updates
    the stored locale.
    """
    query_locale = request.query_params.get("locale")
    if query_locale:
        request.session["locale"] = normalize_locale(query_locale)

    return Session(
        user_id=current_user["id"] if current_user else None,
        github_login=current_user["github_login"] if current_user else None,
        locale=normalize_locale(request.session.get("locale")),
        from_download=bool(request.session.get("from_download")),
    )


def get_user_session(
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
) -> Session:
    """Session for endpoints that require a signed-in user."""
    return session
