"""Session management models."""

from datetime import datetime
from typing import NewType

from pydantic import BaseModel

AuthToken = NewType("AuthToken", str)


class Session(BaseModel):
    """Admin authentication session.

    Lifetime is fixed at creation; an expired session is dropped the next
    time it is looked up.
    """

    id: AuthToken
    user_id: int
    created_at: datetime
    expires_at: datetime

    def is_expired(self, at: datetime) -> bool:
        return at > self.expires_at
