from fastapi import APIRouter, Depends, Response

from ..auth import TOKEN_COOKIE, issue_token
from ..config import Settings
from ..deps import get_settings
from ..logging_config import get_logger
from ..schemas import LoginPayload, LoginResponse

router = APIRouter(tags=["auth"])
logger = get_logger(__name__)


@router.post("/jwt", response_model=LoginResponse)
def login(payload: LoginPayload, response: Response, settings: Settings = Depends(get_settings)):
    """Issue a session token for the posted identity and set it as an http-only cookie."""
    token = issue_token(
        payload.model_dump(),
        settings.ACCESS_TOKEN_SECRET,
        ttl_seconds=settings.TOKEN_TTL_SECONDS,
    )
    response.set_cookie(
        key=TOKEN_COOKIE,
        value=token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        max_age=settings.TOKEN_TTL_SECONDS,
    )
    logger.info("token issued for %s", payload.email)
    return LoginResponse(success=True)
