"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from chatrooms.domain.value_objects.username import Username
from chatrooms.domain.value_objects.room_id import RoomId
from chatrooms.domain.value_objects.message_id import MessageId

__all__ = [
    "Username",
    "RoomId",
    "MessageId",
]
