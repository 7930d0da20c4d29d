"""
ChatRoom Aggregate - A room with its members and its message sequence.

Invariants:
- members holds at most one user per Username.key
- a message is accepted only while its sender is a member

The aggregate only signals accept/reject (True/False). Callers run the
mutators under the room's exclusive access (see RoomStore.mutate_exclusively)
and translate rejections into errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from chatrooms.domain.entities.message import Message
from chatrooms.domain.entities.user import User
from chatrooms.domain.value_objects.message_id import MessageId
from chatrooms.domain.value_objects.room_id import RoomId
from chatrooms.domain.value_objects.username import Username


@dataclass
class ChatRoom:
    id: RoomId
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    _members: dict[str, User] = field(default_factory=dict, repr=False)
    _messages: list[Message] = field(default_factory=list, repr=False)

    @classmethod
    def create(cls) -> ChatRoom:
        """Factory method to create an empty room with a generated ID."""
        return cls(id=RoomId.generate())

    # ==================== READS (snapshots) ====================

    @property
    def members(self) -> tuple[User, ...]:
        return tuple(self._members.values())

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def is_member(self, username: str | Username) -> bool:
        return Username.of(username).key in self._members

    def find_message(self, message_id: MessageId) -> Optional[Message]:
        for message in self._messages:
            if message.id == message_id:
                return message
        return None

    # ==================== MUTATORS ====================

    def add_member(self, user: User) -> bool:
        if user is None:
            raise ValueError("user is required")
        if user.key in self._members:
            return False
        self._members[user.key] = user
        return True

    def add_message(self, message: Message) -> bool:
        if message is None:
            raise ValueError("message is required")
        if message.sender is None or message.sender.key not in self._members:
            return False
        if self.find_message(message.id) is not None:
            return False
        self._messages.append(message)
        return True
