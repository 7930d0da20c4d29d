"""
ConflictError - Raised when a mutation would break an aggregate invariant
(duplicate member, message from a non-member, illegal message transition).
Maps to: HTTP 409 Conflict
"""


class ConflictError(Exception):
    """Exception raised when a requested change conflicts with current state."""

    def __init__(self, message: str = "The request conflicts with the current state."):
        super().__init__(message)


class RoomBusyError(ConflictError):
    """Room lock could not be acquired within the configured timeout."""

    def __init__(self, room_id: str, timeout: float):
        super().__init__(f"Room {room_id} is busy (lock wait exceeded {timeout}s)")
        self.room_id = room_id
        self.timeout = timeout
