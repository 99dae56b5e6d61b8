from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

JWT_ALGORITHM = "HS256"


def create_access_token(*, secret: str, user_id: int, github_login: str, expires_minutes: int = 60) -> str:
    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "login": github_login,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes = expires_minutes)).timestamp())
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def decode_access_token(*, secret: str, token: str) -> dict[str, Any]:
    # will raise exceptions if invalid/expired
    return jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
