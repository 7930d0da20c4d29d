"""
Chat Rooms API Router - FastAPI endpoints for rooms, membership and messages.

Guidelines:
- Receives the ChatCoordinator via Dependency Injection (Dishka)
- Thin layer: only handles HTTP concerns (request/response)
- Domain errors propagate to the app-level exception handlers
  (400 validation, 404 not found, 409 conflict)

Flow:
  HTTP Request → Router → ChatCoordinator → UserDirectory / RoomStore
                                 ↓
  HTTP Response ← Router ← RoomDTO / MessageDTO
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, status
from pydantic import BaseModel

from chatrooms.application.dto.chat import MessageDTO, RoomDTO
from chatrooms.application.services.chat_coordinator import ChatCoordinator

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateRoomResponse(BaseModel):
    id: str


class ListRoomsResponse(BaseModel):
    rooms: list[str]


class AddUserRequest(BaseModel):
    """Request body for adding a registered user to a room."""

    username: str


class SendMessageRequest(BaseModel):
    """
    Request body for posting a message.

    {
        "username": "alice",
        "content": "hi",
        "id": "uuid" (optional, generated when absent)
    }
    """

    username: str
    content: str
    id: Optional[str] = None


class EditMessageRequest(BaseModel):
    username: str
    content: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/chat", tags=["chat"])


# ==================== ENDPOINTS ====================


@router.post(
    "",
    response_model=CreateRoomResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_room(coordinator: FromDishka[ChatCoordinator]):
    """Create a new, empty chat room."""
    room_id = await coordinator.create_room()
    return CreateRoomResponse(id=room_id.value)


@router.get("", response_model=ListRoomsResponse, status_code=status.HTTP_200_OK)
@inject
async def list_rooms(coordinator: FromDishka[ChatCoordinator]):
    room_ids = await coordinator.list_rooms()
    return ListRoomsResponse(rooms=[room_id.value for room_id in room_ids])


@router.get("/{room_id}", response_model=RoomDTO, status_code=status.HTTP_200_OK)
@inject
async def get_room(room_id: str, coordinator: FromDishka[ChatCoordinator]):
    """Get a room with its members and messages."""
    return await coordinator.get_room_view(room_id)


@router.post(
    "/{room_id}/users",
    response_model=RoomDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def add_user_to_room(
    room_id: str,
    request: AddUserRequest,
    coordinator: FromDishka[ChatCoordinator],
):
    """Add a registered user to the room and return the updated room."""
    return await coordinator.add_user_to_room(room_id, request.username)


@router.post(
    "/{room_id}/messages",
    response_model=RoomDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def send_message(
    room_id: str,
    request: SendMessageRequest,
    coordinator: FromDishka[ChatCoordinator],
):
    """Post a message to the room and return the updated room."""
    await coordinator.send_message(
        room_id,
        sender_username=request.username,
        content=request.content,
        message_id=request.id,
    )
    return await coordinator.get_room_view(room_id)


@router.patch(
    "/{room_id}/messages/{message_id}",
    response_model=MessageDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def edit_message(
    room_id: str,
    message_id: str,
    request: EditMessageRequest,
    coordinator: FromDishka[ChatCoordinator],
):
    """Edit a message's content (sender only)."""
    return await coordinator.edit_message(
        room_id,
        message_id,
        editor_username=request.username,
        content=request.content,
    )
