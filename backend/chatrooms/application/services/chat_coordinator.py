"""
ChatCoordinator - Cross-store orchestration between UserDirectory and RoomStore.

Identity is resolved in the UserDirectory first; only then is the room's
exclusive mutation scope entered. The room lock is never held while the
directory is consulted.

The two stores are not wrapped in one transaction. Membership is re-checked
inside the exclusive mutation, so a membership change between the read-side
pre-check and the append cannot slip through. Deleting a user from the
directory does not cascade into rooms the user already joined.
"""

import logging
from typing import Optional

from chatrooms.application.dto.chat import MessageDTO, RoomDTO
from chatrooms.domain.entities.chat_room import ChatRoom
from chatrooms.domain.entities.message import Message
from chatrooms.domain.exceptions import (
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
)
from chatrooms.domain.ports.repositories import RoomStore, UserDirectory
from chatrooms.domain.value_objects.message_id import MessageId
from chatrooms.domain.value_objects.room_id import RoomId
from chatrooms.domain.value_objects.username import Username

logger = logging.getLogger(__name__)


def _require_text(value: Optional[str], what: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise DomainValidationError(f"{what} cannot be empty")
    return value


class ChatCoordinator:
    def __init__(self, room_store: RoomStore, user_directory: UserDirectory):
        self._rooms = room_store
        self._users = user_directory

    # ==================== ROOMS ====================

    async def create_room(self) -> RoomId:
        room = await self._rooms.create()
        return room.id

    async def list_rooms(self) -> list[RoomId]:
        return [room.id for room in await self._rooms.list()]

    async def get_room_view(self, room_id: str | RoomId) -> RoomDTO:
        room = await self._get_room(room_id)
        return RoomDTO.from_entity(room)

    # ==================== MEMBERSHIP ====================

    async def add_user_to_room(
        self, room_id: str | RoomId, username: str | Username
    ) -> RoomDTO:
        """
        Add a globally registered user to a room.

        Raises:
            DomainValidationError: blank username or malformed room id
            EntityNotFoundError: user not registered, or room missing
            ConflictError: user is already a member
        """
        room_id = self._room_id(room_id)
        user = await self._users.lookup(username)
        if user is None:
            raise EntityNotFoundError(f"User '{username}' does not exist")

        room = await self._get_room(room_id)

        added = await self._rooms.mutate_exclusively(
            room.id, lambda r: r.add_member(user)
        )
        if not added:
            raise ConflictError(
                f"User '{user.username}' is already a member of room {room.id}"
            )

        logger.info("[Chat] User '%s' joined room %s", user.username, room.id)
        return RoomDTO.from_entity(room)

    # ==================== MESSAGES ====================

    async def send_message(
        self,
        room_id: str | RoomId,
        sender_username: str,
        content: str,
        message_id: Optional[str | MessageId] = None,
    ) -> MessageDTO:
        """
        Post a message on behalf of a room member.

        Steps:
        1. Validate sender and content
        2. Resolve room, then sender
        3. Read-side membership pre-check
        4. Append inside the room's exclusive mutation (membership re-checked)

        Raises:
            DomainValidationError: blank sender/content, malformed ids
            EntityNotFoundError: room missing, sender not registered
            ConflictError: sender not a member, or message rejected by the room
        """
        _require_text(sender_username, "Sender username")
        _require_text(content, "Message content")
        room_id = self._room_id(room_id)
        if message_id is not None and not isinstance(message_id, MessageId):
            message_id = MessageId(message_id)

        room = await self._get_room(room_id)

        sender = await self._users.lookup(sender_username)
        if sender is None:
            raise EntityNotFoundError(f"User '{sender_username}' does not exist")

        if not room.is_member(sender.username):
            logger.info(
                "[Chat] Rejected message from non-member '%s' in room %s",
                sender.username,
                room.id,
            )
            raise ConflictError(
                f"User '{sender.username}' is not a member of room {room.id}"
            )

        message = Message.create(sender=sender, content=content, message_id=message_id)

        accepted = await self._rooms.mutate_exclusively(
            room.id, lambda r: r.add_message(message)
        )
        if not accepted:
            logger.warning(
                "[Chat] Room %s rejected message %s from '%s'",
                room.id,
                message.id,
                sender.username,
            )
            raise ConflictError(
                f"Message from '{sender.username}' was rejected by room {room.id}"
            )

        logger.info(
            "[Chat] Message %s from '%s' accepted in room %s",
            message.id,
            sender.username,
            room.id,
        )
        return MessageDTO.from_entity(room.id, message)

    async def edit_message(
        self,
        room_id: str | RoomId,
        message_id: str | MessageId,
        editor_username: str,
        content: str,
    ) -> MessageDTO:
        """
        Replace a message's content. Only its sender may edit it; sending the
        same content again changes nothing.
        """
        _require_text(editor_username, "Editor username")
        _require_text(content, "Message content")
        room_id = self._room_id(room_id)
        if not isinstance(message_id, MessageId):
            message_id = MessageId(message_id)
        editor = Username(editor_username)

        room = await self._get_room(room_id)

        def apply(r: ChatRoom) -> Message:
            message = r.find_message(message_id)
            if message is None:
                raise EntityNotFoundError(
                    f"Message {message_id} not found in room {r.id}"
                )
            if message.sender.key != editor.key:
                raise ConflictError(
                    f"User '{editor}' cannot edit a message sent by "
                    f"'{message.sender.username}'"
                )
            if message.edit(content):
                logger.info("[Chat] Message %s edited in room %s", message.id, r.id)
            return message

        message = await self._rooms.mutate_exclusively(room.id, apply)
        return MessageDTO.from_entity(room.id, message)

    # ==================== HELPERS ====================

    @staticmethod
    def _room_id(room_id: str | RoomId) -> RoomId:
        return room_id if isinstance(room_id, RoomId) else RoomId(room_id)

    async def _get_room(self, room_id: str | RoomId) -> ChatRoom:
        room_id = self._room_id(room_id)
        room = await self._rooms.get(room_id)
        if room is None:
            raise EntityNotFoundError(f"Room {room_id} not found")
        return room
