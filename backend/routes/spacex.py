"""
Read-only proxy for the SpaceX resources the shell displays.

Responses are the same normalized DTOs the façade returns. Upstream errors
are passed through by the handlers in errors.py (same status, {"error": ...}).
"""

from collections.abc import AsyncIterator

from fastapi import APIRouter, Depends

from models.spacex import About, EventBrief, EventFull, Roadster, RocketBrief, RocketFull
from spacex.client import SpaceXClient

router = APIRouter(prefix="/api/spacex", tags=["spacex"])


async def get_spacex() -> AsyncIterator[SpaceXClient]:
    client = SpaceXClient.create()
    try:
        yield client
    finally:
        await client.aclose()


@router.get("/company", response_model=About)
async def company(spacex: SpaceXClient = Depends(get_spacex)):
    return await spacex.company()


@router.get("/history", response_model=list[EventBrief])
async def history(spacex: SpaceXClient = Depends(get_spacex)):
    return await spacex.history()


@router.get("/history/{event_id}", response_model=EventFull)
async def history_event(event_id: str, spacex: SpaceXClient = Depends(get_spacex)):
    return await spacex.history_event(event_id)


@router.get("/rockets", response_model=list[RocketBrief])
async def rockets(spacex: SpaceXClient = Depends(get_spacex)):
    return await spacex.rockets()


@router.get("/rockets/{rocket_id}", response_model=RocketFull)
async def rocket(rocket_id: str, spacex: SpaceXClient = Depends(get_spacex)):
    return await spacex.rocket(rocket_id)


@router.get("/roadster", response_model=Roadster)
async def roadster(spacex: SpaceXClient = Depends(get_spacex)):
    return await spacex.roadster()
