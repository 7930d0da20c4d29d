"""
In-Memory User Directory Implementation.

Guidelines:
- Implements UserDirectory port from domain layer
- Users live in a dict keyed by Username.key (lower-cased), so lookups,
  upserts and deletes are case-insensitive by construction
- Every operation finishes without awaiting, which makes each one atomic
  with respect to the others on the event loop
- list() hands out a tuple copy, a snapshot of the directory at call time

Volatile: contents live for the lifetime of the process only.
"""

import logging
from typing import Optional, Sequence

from chatrooms.domain.entities.user import User
from chatrooms.domain.ports.repositories import UserDirectory
from chatrooms.domain.value_objects.username import Username

logger = logging.getLogger(__name__)


class InMemoryUserDirectory(UserDirectory):
    _users: dict[str, User]

    def __init__(self):
        self._users = {}

    async def register(
        self, username: str | Username, photo: Optional[bytes] = None
    ) -> User:
        """Create or replace the user registered under this username."""
        user = User(username=Username.of(username), photo=photo)
        replaced = user.key in self._users
        self._users[user.key] = user
        logger.info(
            "[UserDirectory] %s user '%s' (photo=%s)",
            "Replaced" if replaced else "Registered",
            user.username,
            user.has_photo,
        )
        return user

    async def lookup(self, username: str | Username) -> Optional[User]:
        return self._users.get(Username.of(username).key)

    async def exists(self, username: str | Username) -> bool:
        return Username.of(username).key in self._users

    async def list(self) -> Sequence[User]:
        return tuple(self._users.values())

    async def delete(self, username: str | Username) -> bool:
        """Remove the user. Rooms the user already joined are left untouched."""
        key = Username.of(username).key
        removed = self._users.pop(key, None)
        if removed is None:
            return False
        logger.info("[UserDirectory] Deleted user '%s'", removed.username)
        return True

    async def get_photo(self, username: str | Username) -> Optional[bytes]:
        user = self._users.get(Username.of(username).key)
        return user.photo if user else None
