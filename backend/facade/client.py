"""
Data access façade.

One async method per capability the application shell needs. Transport
details stay in here; callers only ever see the DTOs from models/.

Two error contracts, on purpose:
  - auth methods (login_user, logout_user) never raise. Any failure is
    logged and turned into None.
  - everything else lets httpx / pydantic errors reach the caller as-is.

The local session lives in the cookie jar of `self.http`, so one Client
corresponds to one browser session.
"""

import logging
from typing import Optional, Union

import httpx
from pydantic import TypeAdapter

import config
from models.item import Item
from models.spacex import About, EventBrief, EventFull, Roadster, RocketBrief, RocketFull
from spacex.client import SpaceXClient

logger = logging.getLogger(__name__)

_ITEMS = TypeAdapter(list[Item])


class Client:
    def __init__(
        self,
        base_url: str = f"https://localhost:{config.APP_PORT}",
        upstream_url: str = config.SPACEX_API_BASE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        upstream_transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        self.http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)
        self.spacex = SpaceXClient(
            httpx.AsyncClient(base_url=upstream_url, transport=upstream_transport, timeout=timeout)
        )

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.http.aclose()
        await self.spacex.aclose()

    # ─── Session ───────────────────────────────────────────────────────

    async def get_user(self) -> Optional[str]:
        """
        Current username, or None when nobody is logged in.

        Raises httpx errors on transport failure or any non-2xx other than
        401 (which only means "not logged in").
        """
        resp = await self.http.get("/api/user")
        if resp.status_code == 401:
            return None
        resp.raise_for_status()
        return resp.json().get("user")

    async def login_user(self, username: str) -> Optional[str]:
        """Log in as `username`; returns the confirmed name, or None on any failure."""
        try:
            resp = await self.http.post("/api/login", json={"username": username})
            resp.raise_for_status()
            return resp.json()["username"]
        except Exception:
            logger.exception("Login failed for %r", username)
            return None

    async def logout_user(self) -> None:
        try:
            resp = await self.http.delete("/api/logout")
            resp.raise_for_status()
            logger.info("User logged out")
        except Exception:
            logger.exception("Logout failed")

    # ─── SpaceX (read-only, straight to upstream) ──────────────────────

    async def get_info(self) -> About:
        return await self.spacex.company()

    async def get_history(self) -> list[EventBrief]:
        return await self.spacex.history()

    async def get_history_event(self, event_id: Union[int, str]) -> EventFull:
        return await self.spacex.history_event(event_id)

    async def get_rockets(self) -> list[RocketBrief]:
        return await self.spacex.rockets()

    async def get_rocket(self, rocket_id: Union[int, str]) -> RocketFull:
        return await self.spacex.rocket(rocket_id)

    async def get_roadster(self) -> Roadster:
        return await self.spacex.roadster()

    # ─── Mars shipments ────────────────────────────────────────────────
    # Every call answers with the whole collection; treat that, not the
    # item you passed in, as the current state.

    async def get_sent_to_mars(self) -> list[Item]:
        resp = await self.http.get("/api/sentToMars")
        resp.raise_for_status()
        return _ITEMS.validate_python(resp.json())

    async def send_to_mars(self, item: Item) -> list[Item]:
        resp = await self.http.post(
            f"/api/sendToMars/{item.id}",
            json=item.model_dump(exclude_none=True),
        )
        resp.raise_for_status()
        return _ITEMS.validate_python(resp.json())

    async def cancel_sending_to_mars(self, item: Item) -> list[Item]:
        resp = await self.http.delete(f"/api/cancelSendingToMars/{item.id}")
        resp.raise_for_status()
        return _ITEMS.validate_python(resp.json())
