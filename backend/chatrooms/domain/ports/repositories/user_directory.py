"""
User Directory Port - Global registry of users keyed by case-insensitive username.
Implementation: chatrooms/infrastructure/persistence/in_memory_user_directory.py

Every method taking a username raises DomainValidationError for blank input.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from chatrooms.domain.entities.user import User
from chatrooms.domain.value_objects.username import Username


class UserDirectory(ABC):
    @abstractmethod
    async def register(
        self, username: str | Username, photo: Optional[bytes] = None
    ) -> User: ...

    @abstractmethod
    async def lookup(self, username: str | Username) -> Optional[User]: ...

    @abstractmethod
    async def exists(self, username: str | Username) -> bool: ...

    @abstractmethod
    async def list(self) -> Sequence[User]: ...

    @abstractmethod
    async def delete(self, username: str | Username) -> bool: ...

    @abstractmethod
    async def get_photo(self, username: str | Username) -> Optional[bytes]: ...
