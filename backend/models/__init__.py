from models.item import Item, ItemToSend
from models.session import Session
from models.spacex import (
    About,
    EventBrief,
    EventFull,
    Headquarters,
    Roadster,
    RocketBrief,
    RocketFull,
)

__all__ = [
    "About",
    "EventBrief",
    "EventFull",
    "Headquarters",
    "Item",
    "ItemToSend",
    "Roadster",
    "RocketBrief",
    "RocketFull",
    "Session",
]
