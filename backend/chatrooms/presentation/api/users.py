"""
Users API Router - FastAPI endpoints for the global user directory.

Photos cross this boundary as base64 text and are decoded here, once.
"""

import base64
import binascii
from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, HTTPException, Response, status
from pydantic import BaseModel

from chatrooms.application.dto.user import UserDTO
from chatrooms.config.settings import Config
from chatrooms.domain.exceptions import EntityNotFoundError
from chatrooms.domain.ports.repositories import UserDirectory

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateUserRequest(BaseModel):
    """Request body for registering (or replacing) a user."""

    username: str
    photo_base64: Optional[str] = None


class ListUsersResponse(BaseModel):
    users: list[UserDTO]


def _decode_photo(photo_base64: Optional[str]) -> Optional[bytes]:
    if photo_base64 is None or not photo_base64.strip():
        return None
    try:
        photo = base64.b64decode(photo_base64, validate=True)
    except (binascii.Error, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="photo_base64 is not valid base64",
        ) from e
    if len(photo) > Config.MAX_PHOTO_BYTES:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Photo exceeds {Config.MAX_PHOTO_MB} MB",
        )
    return photo


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/user", tags=["users"])


# ==================== ENDPOINTS ====================


@router.post("", response_model=UserDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_user(
    request: CreateUserRequest,
    user_directory: FromDishka[UserDirectory],
):
    """Register a user; an existing user with the same name is replaced."""
    photo = _decode_photo(request.photo_base64)
    user = await user_directory.register(request.username, photo)
    return UserDTO.from_entity(user)


@router.get("", response_model=ListUsersResponse, status_code=status.HTTP_200_OK)
@inject
async def list_users(user_directory: FromDishka[UserDirectory]):
    users = await user_directory.list()
    return ListUsersResponse(users=[UserDTO.from_entity(user) for user in users])


@router.get("/{username}", response_model=UserDTO, status_code=status.HTTP_200_OK)
@inject
async def get_user(username: str, user_directory: FromDishka[UserDirectory]):
    user = await user_directory.lookup(username)
    if user is None:
        raise EntityNotFoundError(f"User '{username}' not found")
    return UserDTO.from_entity(user)


@router.head("/{username}", status_code=status.HTTP_200_OK)
@inject
async def user_exists(username: str, user_directory: FromDishka[UserDirectory]):
    if not await user_directory.exists(username):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{username}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_user(username: str, user_directory: FromDishka[UserDirectory]):
    """Delete a user. Rooms the user joined keep the membership."""
    if not await user_directory.delete(username):
        raise EntityNotFoundError(f"User '{username}' not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{username}/photo", status_code=status.HTTP_200_OK)
@inject
async def get_user_photo(username: str, user_directory: FromDishka[UserDirectory]):
    """Raw profile photo bytes; 204 when the user has none."""
    if not await user_directory.exists(username):
        raise EntityNotFoundError(f"User '{username}' not found")
    photo = await user_directory.get_photo(username)
    if not photo:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return Response(content=photo, media_type="application/octet-stream")
