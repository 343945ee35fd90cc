from typing import Optional

from pydantic import BaseModel, ConfigDict


class ItemToSend(BaseModel):
    """Request body of a send; the id normally travels in the URL path."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    name: str
    phone: str
    weight: Optional[float] = None
    color: Optional[str] = None
    important: Optional[bool] = None


class Item(ItemToSend):
    id: str
