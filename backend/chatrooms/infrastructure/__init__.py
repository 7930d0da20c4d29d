"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Volatile in-memory stores (InMemoryUserDirectory, InMemoryRoomStore)
"""

from chatrooms.infrastructure.persistence import (
    InMemoryRoomStore,
    InMemoryUserDirectory,
)

__all__ = [
    "InMemoryRoomStore",
    "InMemoryUserDirectory",
]
