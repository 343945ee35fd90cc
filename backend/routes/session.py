import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Response
from pydantic import BaseModel

import config
from errors import error_response
from guard import current_session, encode_username
from models.session import Session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["session"])


# ---------- Response schemas ----------

class UserResponse(BaseModel):
    user: Optional[str] = None


class LoginResponse(BaseModel):
    username: str


class LogoutResponse(BaseModel):
    message: str


# ---------- Endpoints ----------

@router.get("/user", response_model=UserResponse)
async def get_user(session: Session = Depends(current_session)):
    """Who this request's cookie says is logged in (null when anonymous)."""
    return UserResponse(user=session.username)


@router.post("/login", response_model=LoginResponse)
async def login(response: Response, body: Any = Body(default=None)):
    """
    Sets the `logged` cookie to the given username.
    Re-login simply overwrites the identity; there is one session per browser.
    """
    username = body.get("username") if isinstance(body, dict) else None
    if not isinstance(username, str) or not username.strip():
        return error_response(400, "Username is required")

    response.set_cookie(
        config.SESSION_COOKIE,
        encode_username(username),
        httponly=True,
        secure=config.COOKIE_SECURE,
        samesite="strict",
    )
    logger.info("User %r logged in", username)
    return LoginResponse(username=username)


@router.delete("/logout", response_model=LogoutResponse)
async def logout(response: Response, session: Session = Depends(current_session)):
    """Clears the cookie. Safe to call when nobody is logged in."""
    response.delete_cookie(
        config.SESSION_COOKIE,
        httponly=True,
        secure=config.COOKIE_SECURE,
        samesite="strict",
    )
    if session.authenticated:
        logger.info("User %r logged out", session.username)
    return LogoutResponse(message="User logged out")
