"""Chat room DTOs for API responses."""

from datetime import datetime
from pydantic import BaseModel
from typing import Optional

from chatrooms.domain.entities.chat_room import ChatRoom
from chatrooms.domain.entities.message import Message
from chatrooms.domain.entities.user import User
from chatrooms.domain.value_objects.room_id import RoomId


class MemberDTO(BaseModel):
    """A room member as shown to clients."""

    username: str
    has_photo: bool = False

    @classmethod
    def from_entity(cls, user: User) -> "MemberDTO":
        return cls(username=user.username.value, has_photo=user.has_photo)


class MessageDTO(BaseModel):
    """DTO for message data returned to clients."""

    id: str
    room_id: str
    sender: str
    content: str
    sent_at: datetime
    edited: bool = False
    edited_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, room_id: RoomId, message: Message) -> "MessageDTO":
        return cls(
            id=message.id.value,
            room_id=room_id.value,
            sender=message.sender.username.value,
            content=message.content,
            sent_at=message.sent_at,
            edited=message.edited,
            edited_at=message.edited_at,
        )


class RoomDTO(BaseModel):
    """Room projection: members and messages in insertion order."""

    id: str
    members: list[MemberDTO]
    messages: list[MessageDTO]

    @classmethod
    def from_entity(cls, room: ChatRoom) -> "RoomDTO":
        # Each property returns its own copy of the collection
        members = room.members
        messages = room.messages
        return cls(
            id=room.id.value,
            members=[MemberDTO.from_entity(user) for user in members],
            messages=[MessageDTO.from_entity(room.id, msg) for msg in messages],
        )
