# jobportal_api/deps.py
from typing import Any, Dict

from fastapi import Cookie, Depends, HTTPException, Request

from .auth import AuthError, validate_token
from .config import Settings, settings as default_settings
from .db import JobStore
from .logging_config import get_logger

logger = get_logger(__name__)


def get_settings() -> Settings:
    return default_settings


def get_store(request: Request) -> JobStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return store


def require_identity(
    token: str | None = Cookie(None),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Decode the `token` cookie into the caller's identity or raise 401.

    Missing and invalid tokens get the same response so clients can't tell
    them apart.
    """
    try:
        return validate_token(token, settings.ACCESS_TOKEN_SECRET)
    except AuthError as e:
        logger.debug("rejected token: %s", e)
        raise HTTPException(status_code=401, detail="Unauthorized access")


def require_email_match(identity: Dict[str, Any], email: str | None) -> None:
    if not email or identity.get("email") != email:
        raise HTTPException(status_code=403, detail="Forbidden access")
