"""
REPOSITORY PORTS - Storage interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation

Infrastructure layer provides implementations.
"""

from chatrooms.domain.ports.repositories.user_directory import UserDirectory
from chatrooms.domain.ports.repositories.room_store import RoomStore

__all__ = [
    "UserDirectory",
    "RoomStore",
]
