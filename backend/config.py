"""
Runtime configuration.

Every value comes from the environment (a local `.env` is loaded by main.py
before this module is imported). Defaults match a local development setup:

  SPACEX_API_BASE=https://api.spacexdata.com/v4
  APP_PORT=3030
  COOKIE_SECURE=true
"""

import os


def _flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# ─── Upstream ──────────────────────────────────────────────────────────

SPACEX_API_BASE = os.environ.get("SPACEX_API_BASE", "https://api.spacexdata.com/v4").rstrip("/")

# ─── Server ────────────────────────────────────────────────────────────

APP_HOST = os.environ.get("APP_HOST", "127.0.0.1")
APP_PORT = int(os.environ.get("APP_PORT", "3030"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

STATIC_DIR = os.environ.get("STATIC_DIR", os.path.join("spa", "build", "static"))
SHELL_INDEX = os.environ.get("SHELL_INDEX", os.path.join("spa", "build", "index.html"))

TLS_KEYFILE = os.environ.get("TLS_KEYFILE", os.path.join("certs", "server.key"))
TLS_CERTFILE = os.environ.get("TLS_CERTFILE", os.path.join("certs", "server.cert"))

# ─── Session cookie ────────────────────────────────────────────────────

SESSION_COOKIE = "logged"
COOKIE_SECURE = _flag("COOKIE_SECURE", True)
