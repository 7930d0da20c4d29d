"""User DTOs for API request/response."""

import base64
from pydantic import BaseModel
from typing import Optional

from chatrooms.domain.entities.user import User


class UserDTO(BaseModel):
    """Registered user; the photo travels as base64 text."""

    username: str
    photo_base64: Optional[str] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(
            username=user.username.value,
            photo_base64=(
                base64.b64encode(user.photo).decode("ascii") if user.has_photo else None
            ),
        )
