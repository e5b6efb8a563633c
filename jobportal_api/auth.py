"""Signed session tokens for the cookie auth gate.

Two pure functions: ``issue_token`` signs an identity into a short-lived JWT,
``validate_token`` turns a token back into that identity or raises
``AuthError``. FastAPI wiring (cookie reading, 401/403) lives in ``deps``.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional

import jwt

ALGORITHM = "HS256"
TOKEN_COOKIE = "token"
_REGISTERED_CLAIMS = ("exp", "iat")


class AuthError(Exception):
    pass


def issue_token(
    identity: Mapping[str, Any],
    secret: str,
    ttl_seconds: int = 3600,
    now: Optional[datetime] = None,
) -> str:
    issued_at = now or datetime.now(timezone.utc)
    payload = dict(identity)
    payload["iat"] = issued_at
    payload["exp"] = issued_at + timedelta(seconds=ttl_seconds)
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def validate_token(token: Optional[str], secret: str) -> Dict[str, Any]:
    if not token:
        raise AuthError("missing token")
    try:
        claims = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError as e:
        raise AuthError("token expired") from e
    except jwt.InvalidTokenError as e:
        raise AuthError(f"invalid token: {e!s}") from e
    return {k: v for k, v in claims.items() if k not in _REGISTERED_CLAIMS}
