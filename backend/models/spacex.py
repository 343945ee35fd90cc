"""
DTOs returned to callers for the SpaceX resources.

Upstream payloads carry many more fields than these; anything not declared
here is dropped at the boundary (see spacex/normalize.py).
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict


class _DTO(BaseModel):
    model_config = ConfigDict(extra="ignore")


# ---------- Company ----------

class Headquarters(_DTO):
    address: str
    city: str
    state: str


class About(_DTO):
    founder: str
    founded: int
    employees: int
    ceo: str
    coo: str
    cto: str
    valuation: float
    headquarters: Headquarters
    summary: str


# ---------- History ----------

class EventBrief(_DTO):
    id: Union[int, str]
    title: str


class EventFull(EventBrief):
    event_date_utc: Optional[str] = None
    details: Optional[str] = None
    links: dict[str, Optional[str]] = {}


# ---------- Rockets ----------

class RocketBrief(_DTO):
    rocket_id: Union[int, str]
    rocket_name: str


class RocketFull(RocketBrief):
    first_flight: Optional[str] = None
    description: Optional[str] = None
    wikipedia: Optional[str] = None
    flickr_images: list[str] = []
    # Engineering specs are passed through as-is
    height: Optional[dict[str, Any]] = None
    diameter: Optional[dict[str, Any]] = None
    mass: Optional[dict[str, Any]] = None
    engines: Optional[dict[str, Any]] = None
    first_stage: Optional[dict[str, Any]] = None
    second_stage: Optional[dict[str, Any]] = None


# ---------- Roadster ----------

class Roadster(_DTO):
    name: str
    launch_date_utc: Optional[str] = None
    details: Optional[str] = None
    earth_distance_km: Optional[float] = None
    mars_distance_km: Optional[float] = None
    wikipedia: Optional[str] = None
