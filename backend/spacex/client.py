"""
Read-only client for the SpaceX v4 API.

One coroutine per resource. Every call is a fresh GET: no retry, no cache.
Transport errors, non-2xx statuses (httpx.HTTPStatusError, including an
unknown id's 404) and malformed payloads propagate to the caller untouched.
"""

import logging
from typing import Any, Union

import httpx

import config
from models.spacex import About, EventBrief, EventFull, Roadster, RocketBrief, RocketFull
from spacex import normalize

logger = logging.getLogger(__name__)


class SpaceXClient:
    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    @classmethod
    def create(cls, base_url: str = None, **kwargs) -> "SpaceXClient":
        """Build a client owning its own httpx.AsyncClient (close with aclose())."""
        return cls(httpx.AsyncClient(base_url=base_url or config.SPACEX_API_BASE, **kwargs))

    async def aclose(self) -> None:
        await self.http.aclose()

    async def _get(self, path: str) -> Any:
        resp = await self.http.get(path)
        logger.debug("GET %s -> %s", resp.request.url, resp.status_code)
        resp.raise_for_status()
        return resp.json()

    async def company(self) -> About:
        return normalize.to_about(await self._get("/company"))

    async def history(self) -> list[EventBrief]:
        return normalize.to_event_briefs(await self._get("/history"))

    async def history_event(self, event_id: Union[int, str]) -> EventFull:
        return normalize.to_event_full(await self._get(f"/history/{event_id}"))

    async def rockets(self) -> list[RocketBrief]:
        return normalize.to_rocket_briefs(await self._get("/rockets"))

    async def rocket(self, rocket_id: Union[int, str]) -> RocketFull:
        return normalize.to_rocket_full(await self._get(f"/rockets/{rocket_id}"))

    async def roadster(self) -> Roadster:
        return normalize.to_roadster(await self._get("/roadster"))
