"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- chat.py → MemberDTO, MessageDTO, RoomDTO
- user.py → UserDTO

Note: These are different from domain entities.
DTOs are read-only projections, entities are for business logic.
"""

from chatrooms.application.dto.chat import MemberDTO, MessageDTO, RoomDTO
from chatrooms.application.dto.user import UserDTO

__all__ = [
    "MemberDTO",
    "MessageDTO",
    "RoomDTO",
    "UserDTO",
]
