from typing import Optional

from pydantic import BaseModel


class Session(BaseModel):
    """Per-request view of the `logged` cookie. Never shared between requests."""

    username: Optional[str] = None

    @property
    def authenticated(self) -> bool:
        return bool(self.username)
