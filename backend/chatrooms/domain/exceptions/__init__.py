"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from chatrooms.domain.exceptions.entity_not_found import EntityNotFoundError
from chatrooms.domain.exceptions.conflict import ConflictError, RoomBusyError
from chatrooms.domain.exceptions.validation_error import DomainValidationError

__all__ = [
    "EntityNotFoundError",
    "ConflictError",
    "RoomBusyError",
    "DomainValidationError",
]
