from fastapi import APIRouter

import store
from errors import error_response
from models.item import Item, ItemToSend

router = APIRouter(prefix="/api", tags=["mars"])


@router.get("/sentToMars", response_model=list[Item])
async def sent_to_mars():
    return store.snapshot()


@router.post("/sendToMars/{item_id}", response_model=list[Item])
async def send_to_mars(item_id: str, body: ItemToSend):
    """
    Adds (or replaces) the shipment with this id.
    Returns the whole collection, not just the affected item.
    """
    if body.id is not None and body.id != item_id:
        return error_response(400, "Item id does not match path")

    item = Item(**body.model_dump(exclude={"id"}), id=item_id)
    return store.send(item)


@router.delete("/cancelSendingToMars/{item_id}", response_model=list[Item])
async def cancel_sending_to_mars(item_id: str):
    """Removes the shipment if present; unknown ids are not an error."""
    return store.cancel(item_id)
