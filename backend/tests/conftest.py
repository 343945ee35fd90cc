"""
Shared fixtures.

Upstream SpaceX calls never leave the process: `upstream_transport` is an
httpx.MockTransport answering from the payloads below. The local server is
driven through TestClient / ASGITransport on an https base URL so the
Secure session cookie is sent back like a browser would.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

import config
import store
from main import app
from routes.spacex import get_spacex
from spacex.client import SpaceXClient

BASE_URL = "https://testserver"
UPSTREAM_URL = "https://api.spacexdata.com/v4"


# ---------- Upstream payloads (trimmed copies of real v4 responses) ----------

COMPANY = {
    "headquarters": {
        "address": "Rocket Road",
        "city": "Hawthorne",
        "state": "California",
        "zip": "90250",
    },
    "links": {"website": "https://www.spacex.com/"},
    "name": "SpaceX",
    "founder": "Elon Musk",
    "founded": 2002,
    "employees": 9500,
    "vehicles": 4,
    "launch_sites": 3,
    "test_sites": 3,
    "ceo": "Elon Musk",
    "cto": "Elon Musk",
    "coo": "Gwynne Shotwell",
    "cto_propulsion": "Tom Mueller",
    "valuation": 74000000000,
    "summary": "SpaceX designs, manufactures and launches advanced rockets and spacecraft.",
    "id": "5eb75edc42fea42237d7f3ed",
}

HISTORY = [
    {
        "links": {"article": "http://www.spacex.com/news/2013/02/11/flight-4-launch-update-0"},
        "title": "Falcon reaches Earth orbit",
        "event_date_utc": "2008-09-28T23:15:00Z",
        "event_date_unix": 1222643700,
        "details": "Falcon 1 becomes the first privately developed liquid-fuel rocket to reach Earth orbit.",
        "id": "5f6fb2cfdcfdf403df37971e",
    },
    {
        "links": {"article": None},
        "title": "Dragon berths with ISS",
        "event_date_utc": "2012-05-25T14:02:00Z",
        "event_date_unix": 1337954520,
        "details": None,
        "id": "5f6fb2cfdcfdf403df37971f",
    },
]

EVENT_9 = {
    "id": 9,
    "title": "T",
    "event_date_utc": "2020-01-01",
    "details": "D",
    "links": {"wiki": None},
}

FALCON_9 = {
    "height": {"meters": 70, "feet": 229.6},
    "diameter": {"meters": 3.7, "feet": 12},
    "mass": {"kg": 549054, "lb": 1207920},
    "first_stage": {"reusable": True, "engines": 9, "fuel_amount_tons": 385},
    "second_stage": {"reusable": False, "engines": 1, "fuel_amount_tons": 90},
    "engines": {"number": 9, "type": "merlin", "version": "1D+"},
    "landing_legs": {"number": 4, "material": "carbon fiber"},
    "payload_weights": [{"id": "leo", "kg": 22800}],
    "flickr_images": ["https://farm1.staticflickr.com/929/28787338307_3453a11a77_b.jpg"],
    "name": "Falcon 9",
    "type": "rocket",
    "active": True,
    "stages": 2,
    "boosters": 0,
    "cost_per_launch": 50000000,
    "success_rate_pct": 98,
    "first_flight": "2010-06-04",
    "country": "United States",
    "company": "SpaceX",
    "wikipedia": "https://en.wikipedia.org/wiki/Falcon_9",
    "description": "Falcon 9 is a two-stage rocket designed and manufactured by SpaceX.",
    "id": "5e9d0d95eda69973a809d1ec",
}

FALCON_1 = {"name": "Falcon 1", "id": "5e9d0d95eda69955f709d1eb", "active": False}

ROADSTER = {
    "flickr_images": ["https://farm5.staticflickr.com/4615/40143096241_11128929df_b.jpg"],
    "name": "Elon Musk's Tesla Roadster",
    "launch_date_utc": "2018-02-06T20:45:00.000Z",
    "launch_date_unix": 1517949900,
    "launch_mass_kg": 1350,
    "norad_id": 43205,
    "earth_distance_km": 320888462.13157266,
    "mars_distance_km": 127436614.9427062,
    "wikipedia": "https://en.wikipedia.org/wiki/Elon_Musk%27s_Tesla_Roadster",
    "details": "Elon Musk's Tesla Roadster is an electric sports car that served as the dummy payload.",
    "id": "5eb75f0842fea42237d7f3f4",
}

UPSTREAM_ROUTES = {
    "/v4/company": COMPANY,
    "/v4/history": HISTORY,
    "/v4/history/9": EVENT_9,
    "/v4/rockets": [FALCON_1, FALCON_9],
    f"/v4/rockets/{FALCON_9['id']}": FALCON_9,
    "/v4/roadster": ROADSTER,
}


def upstream_handler(request: httpx.Request) -> httpx.Response:
    payload = UPSTREAM_ROUTES.get(request.url.path)
    if payload is None:
        return httpx.Response(404, request=request, json={"error": "Not Found"})
    return httpx.Response(200, request=request, json=payload)


# ---------- Fixtures ----------

@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def empty_store():
    store.shipments.clear()
    yield
    store.shipments.clear()


@pytest.fixture
def upstream_transport() -> httpx.MockTransport:
    return httpx.MockTransport(upstream_handler)


@pytest.fixture
def shell_index(tmp_path, monkeypatch):
    index = tmp_path / "index.html"
    index.write_text("<!doctype html><div id=\"root\"></div>", encoding="utf-8")
    monkeypatch.setattr(config, "SHELL_INDEX", str(index))
    return index


@pytest.fixture
def client(upstream_transport, shell_index):
    async def _spacex():
        spacex = SpaceXClient(httpx.AsyncClient(base_url=UPSTREAM_URL, transport=upstream_transport))
        try:
            yield spacex
        finally:
            await spacex.aclose()

    app.dependency_overrides[get_spacex] = _spacex
    with TestClient(app, base_url=BASE_URL) as test_client:
        yield test_client
    app.dependency_overrides.clear()
