"""
MessageId Value Object - UUID wrapper for message identity.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4

from chatrooms.domain.exceptions.validation_error import DomainValidationError


@dataclass(frozen=True)
class MessageId:
    value: str  # message_id, presented as UUID string

    def __post_init__(self):
        if not self.value or not str(self.value).strip():
            raise DomainValidationError("Message ID cannot be empty")
        try:
            canonical = str(UUID(str(self.value).strip()))  # raises ValueError if invalid UUID
        except ValueError as e:
            raise DomainValidationError(f"Invalid message ID (UUID): {self.value}") from e
        object.__setattr__(self, "value", canonical)

    @classmethod
    def generate(cls) -> "MessageId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
