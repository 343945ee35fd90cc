"""
Projection of upstream SpaceX payloads into the DTOs in models/spacex.py.

Each projection:
  - rejects anything that is not a JSON object (UpstreamShapeError)
  - picks only the documented fields, renaming where the DTO does
  - logs the upstream keys it dropped (DEBUG) so schema drift is visible
  - validates through the DTO, so a missing required field raises
    pydantic.ValidationError instead of turning into a silent null
"""

import logging
from typing import Any, Optional, TypeVar

from pydantic import BaseModel

from errors import UpstreamShapeError
from models.spacex import (
    About,
    EventBrief,
    EventFull,
    Roadster,
    RocketBrief,
    RocketFull,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# DTO field -> upstream key, where they differ
_ROCKET_RENAMES = {"rocket_id": "id", "rocket_name": "name"}


def _project(model: type[T], data: Any, renames: Optional[dict[str, str]] = None) -> T:
    if not isinstance(data, dict):
        raise UpstreamShapeError(model.__name__, type(data).__name__)

    renames = renames or {}
    picked: dict[str, Any] = {}
    wanted: set[str] = set()

    for field in model.model_fields:
        source = renames.get(field, field)
        wanted.add(source)
        if source in data:
            picked[field] = data[source]

    dropped = sorted(set(data) - wanted)
    if dropped:
        logger.debug("%s: dropped upstream fields %s", model.__name__, dropped)

    return model.model_validate(picked)


def _project_list(model: type[T], data: Any, renames: Optional[dict[str, str]] = None) -> list[T]:
    if not isinstance(data, list):
        raise UpstreamShapeError(f"list[{model.__name__}]", type(data).__name__)
    return [_project(model, entry, renames) for entry in data]


# ---------- Company ----------

def to_about(data: Any) -> About:
    return _project(About, data)


# ---------- History ----------

def to_event_brief(data: Any) -> EventBrief:
    return _project(EventBrief, data)


def to_event_briefs(data: Any) -> list[EventBrief]:
    return _project_list(EventBrief, data)


def to_event_full(data: Any) -> EventFull:
    return _project(EventFull, data)


# ---------- Rockets ----------

def to_rocket_brief(data: Any) -> RocketBrief:
    return _project(RocketBrief, data, _ROCKET_RENAMES)


def to_rocket_briefs(data: Any) -> list[RocketBrief]:
    return _project_list(RocketBrief, data, _ROCKET_RENAMES)


def to_rocket_full(data: Any) -> RocketFull:
    return _project(RocketFull, data, _ROCKET_RENAMES)


# ---------- Roadster ----------

def to_roadster(data: Any) -> Roadster:
    return _project(Roadster, data)
