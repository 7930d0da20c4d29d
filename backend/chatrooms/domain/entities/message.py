"""
Message Entity - A single message posted to a chat room.

Content changes go through two explicit transitions:

    UNSET --send()--> SENT --edit(different)--> EDITED --edit(different)--> EDITED

- send() records sent_at and leaves edited False.
- edit() with the current content is a no-op (returns False).
- edit() with different content sets edited/edited_at; sent_at is kept.
- Blank content is rejected in every state without touching the message.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from chatrooms.domain.entities.user import User
from chatrooms.domain.exceptions import ConflictError, DomainValidationError
from chatrooms.domain.value_objects.message_id import MessageId


class MessageState(str, Enum):
    UNSET = "unset"
    SENT = "sent"
    EDITED = "edited"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _require_content(content: str) -> None:
    if not isinstance(content, str) or not content.strip():
        raise DomainValidationError("Message content cannot be empty")


@dataclass
class Message:
    id: MessageId
    _sender: Optional[User]  # fixed at construction, read through .sender
    _content: Optional[str] = field(default=None, repr=False)
    sent_at: Optional[datetime] = None
    edited: bool = False
    edited_at: Optional[datetime] = None

    @classmethod
    def draft(
        cls,
        sender: Optional[User],
        message_id: Optional[MessageId] = None,
    ) -> Message:
        """Factory method to create an unsent (UNSET) Message."""
        return cls(message_id or MessageId.generate(), sender)

    @classmethod
    def create(
        cls,
        sender: Optional[User],
        content: str,
        message_id: Optional[MessageId] = None,
    ) -> Message:
        """Factory method to create a sent Message with a generated ID unless one is given."""
        _require_content(content)
        message = cls.draft(sender, message_id)
        message.send(content)
        return message

    @property
    def sender(self) -> Optional[User]:
        return self._sender

    @property
    def content(self) -> Optional[str]:
        return self._content

    @property
    def state(self) -> MessageState:
        if self._content is None:
            return MessageState.UNSET
        return MessageState.EDITED if self.edited else MessageState.SENT

    def send(self, content: str) -> None:
        _require_content(content)
        if self.state is not MessageState.UNSET:
            raise ConflictError(f"Message {self.id} was already sent")

        self._content = content
        self.sent_at = _utcnow()
        self.edited = False
        self.edited_at = None

    def edit(self, content: str) -> bool:
        """Replace the content. Returns False when the content is unchanged."""
        _require_content(content)
        if self.state is MessageState.UNSET:
            raise ConflictError(f"Message {self.id} has not been sent yet")
        if content == self._content:
            return False

        self._content = content
        self.edited = True
        self.edited_at = _utcnow()
        return True
