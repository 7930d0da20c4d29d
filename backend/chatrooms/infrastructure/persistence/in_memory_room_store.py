"""
In-Memory Room Store Implementation.

Guidelines:
- Implements RoomStore port from domain layer
- rooms: dict[RoomId, ChatRoom], written only by create(); no store-wide lock
- Each room gets its own asyncio.Lock at creation time
- mutate_exclusively() serializes mutations of ONE room; reads and mutations
  of other rooms are never blocked
- Lock wait is bounded by ROOM_LOCK_TIMEOUT; a timeout raises RoomBusyError
  and the action is not run

Flow:
  mutate_exclusively(room_id, action)
      → look up room (EntityNotFoundError if absent)
      → wait for the room lock (RoomBusyError on timeout)
      → action(room), awaited if it returns an awaitable
      → release lock, return action's result
"""

import asyncio
import inspect
import logging
from typing import Optional, Sequence, TypeVar

from chatrooms.config.settings import Config
from chatrooms.domain.entities.chat_room import ChatRoom
from chatrooms.domain.exceptions import EntityNotFoundError, RoomBusyError
from chatrooms.domain.ports.repositories import RoomStore
from chatrooms.domain.ports.repositories.room_store import RoomAction
from chatrooms.domain.value_objects.room_id import RoomId

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryRoomStore(RoomStore):
    _rooms: dict[RoomId, ChatRoom]
    _locks: dict[RoomId, asyncio.Lock]

    def __init__(self, lock_timeout: Optional[float] = None):
        self._rooms = {}
        self._locks = {}
        self._lock_timeout = (
            Config.ROOM_LOCK_TIMEOUT if lock_timeout is None else lock_timeout
        )

    async def create(self) -> ChatRoom:
        room = ChatRoom.create()
        while room.id in self._rooms:  # uuid4 collision, practically unreachable
            room = ChatRoom.create()
        # Lock first, so a visible room always has one
        self._locks[room.id] = asyncio.Lock()
        self._rooms[room.id] = room
        logger.info("[RoomStore] Created room %s", room.id)
        return room

    async def get(self, room_id: RoomId) -> Optional[ChatRoom]:
        return self._rooms.get(room_id)

    async def list(self) -> Sequence[ChatRoom]:
        return tuple(self._rooms.values())

    async def mutate_exclusively(self, room_id: RoomId, action: RoomAction[T]) -> T:
        room = self._rooms.get(room_id)
        if room is None:
            raise EntityNotFoundError(f"Room {room_id} not found")
        lock = self._locks[room_id]

        try:
            await asyncio.wait_for(lock.acquire(), timeout=self._lock_timeout)
        except asyncio.TimeoutError as e:
            logger.warning(
                "[RoomStore] Gave up waiting for room %s after %.2fs",
                room_id,
                self._lock_timeout,
            )
            raise RoomBusyError(str(room_id), self._lock_timeout) from e

        try:
            result = action(room)
            if inspect.isawaitable(result):
                result = await result
            return result
        finally:
            lock.release()
