"""
Persistence Layer - In-memory implementations of the repository ports.

Nothing here survives a restart; stores live as long as the process.
"""

from chatrooms.infrastructure.persistence.in_memory_user_directory import (
    InMemoryUserDirectory,
)
from chatrooms.infrastructure.persistence.in_memory_room_store import (
    InMemoryRoomStore,
)

__all__ = [
    "InMemoryUserDirectory",
    "InMemoryRoomStore",
]
