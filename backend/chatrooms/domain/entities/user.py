"""
User Entity - A globally registered chat user.
"""

from dataclasses import dataclass
from typing import Optional

from chatrooms.domain.value_objects.username import Username


@dataclass
class User:
    username: Username
    photo: Optional[bytes] = None  # opaque profile photo

    def __post_init__(self):
        self.username = Username.of(self.username)
        if self.photo is not None and not isinstance(self.photo, (bytes, bytearray)):
            raise TypeError("User photo must be bytes")
        if self.photo is not None:
            self.photo = bytes(self.photo)

    @property
    def key(self) -> str:
        return self.username.key

    @property
    def has_photo(self) -> bool:
        return bool(self.photo)
