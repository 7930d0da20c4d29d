"""
RoomId Value Object - UUID wrapper for chat room identity.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4

from chatrooms.domain.exceptions.validation_error import DomainValidationError


@dataclass(frozen=True)
class RoomId:
    value: str  # room_id, presented as canonical UUID string

    def __post_init__(self):
        if not self.value or not str(self.value).strip():
            raise DomainValidationError("Room ID cannot be empty")
        try:
            canonical = str(UUID(str(self.value).strip()))
        except ValueError as e:
            raise DomainValidationError(f"Invalid room ID (UUID): {self.value}") from e
        object.__setattr__(self, "value", canonical)

    @classmethod
    def generate(cls) -> "RoomId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
