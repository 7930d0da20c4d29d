"""
Room Store Port - Keyed collection of ChatRoom aggregates.
Implementation: chatrooms/infrastructure/persistence/in_memory_room_store.py
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Optional, Sequence, TypeVar, Union

from chatrooms.domain.entities.chat_room import ChatRoom
from chatrooms.domain.value_objects.room_id import RoomId

T = TypeVar("T")

RoomAction = Callable[[ChatRoom], Union[T, Awaitable[T]]]


class RoomStore(ABC):
    @abstractmethod
    async def create(self) -> ChatRoom: ...

    @abstractmethod
    async def get(self, room_id: RoomId) -> Optional[ChatRoom]: ...

    @abstractmethod
    async def list(self) -> Sequence[ChatRoom]: ...

    @abstractmethod
    async def mutate_exclusively(self, room_id: RoomId, action: RoomAction[T]) -> T:
        """
        Run action(room) while holding exclusive access to that one room.

        Other rooms stay fully available. Raises EntityNotFoundError if the
        room does not exist.
        """
        ...
