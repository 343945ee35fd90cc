"""
In-memory "sent to Mars" collection shared across all routes.
No DB: the collection lives in a plain dict for the lifetime of the process.

Mutations and the snapshot they return never await in between, so within a
single request the caller always gets a consistent collection.
"""

from models.item import Item

shipments: dict[str, Item] = {}


def snapshot() -> list[Item]:
    return list(shipments.values())


def send(item: Item) -> list[Item]:
    shipments[item.id] = item
    return snapshot()


def cancel(item_id: str) -> list[Item]:
    shipments.pop(item_id, None)
    return snapshot()
