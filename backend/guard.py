"""
Session guard.

Runs once per request, before any route handler:
  - builds the request's Session from the `logged` cookie and stores it on
    request.state.session (the only place handlers read identity from)
  - sends anonymous visitors of protected paths to /login

Exempt: anything under /static or /api, and exactly /login.
"""

from typing import Optional
from urllib.parse import quote, unquote

from fastapi import Request
from fastapi.responses import RedirectResponse

import config
from models.session import Session

LOGIN_PATH = "/login"
EXEMPT_PREFIXES = ("/static", "/api")


def is_exempt(path: str) -> bool:
    return path == LOGIN_PATH or path.startswith(EXEMPT_PREFIXES)


def encode_username(username: str) -> str:
    """Cookie-safe form of a username (percent-encoded)."""
    return quote(username, safe="")


def session_from_cookies(cookies: dict[str, str]) -> Session:
    raw = cookies.get(config.SESSION_COOKIE)
    return Session(username=unquote(raw) if raw else None)


def admission_redirect(path: str, session: Session) -> Optional[str]:
    """Where to send the request instead of its handler, or None to let it through."""
    if session.authenticated or is_exempt(path):
        return None
    return LOGIN_PATH


async def route_guard(request: Request, call_next):
    session = session_from_cookies(request.cookies)
    request.state.session = session

    target = admission_redirect(request.url.path, session)
    if target is not None:
        return RedirectResponse(target, status_code=302)

    return await call_next(request)


def current_session(request: Request) -> Session:
    """FastAPI dependency: the Session the guard attached to this request."""
    session = getattr(request.state, "session", None)
    if session is None:
        session = session_from_cookies(request.cookies)
    return session
