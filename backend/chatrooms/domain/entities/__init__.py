"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from chatrooms.domain.entities.user import User
from chatrooms.domain.entities.message import Message, MessageState
from chatrooms.domain.entities.chat_room import ChatRoom

__all__ = [
    "User",
    "Message",
    "MessageState",
    "ChatRoom",
]
