"""
Username Value Object - Case-insensitive user identity.

Two usernames that differ only in letter case name the same user. The
canonical form is exposed as `key`; directories and rooms index users by it,
so equality and hashing are defined on the key as well.
"""

from dataclasses import dataclass, field

from chatrooms.domain.exceptions.validation_error import DomainValidationError


@dataclass(frozen=True)
class Username:
    value: str = field(compare=False)  # as registered, used for display
    key: str = field(init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise DomainValidationError("Username cannot be empty")
        object.__setattr__(self, "key", self.value.lower())

    @classmethod
    def of(cls, raw: "str | Username") -> "Username":
        """Coerce raw text (or an existing Username) into a Username."""
        if isinstance(raw, Username):
            return raw
        return cls(raw)

    def __str__(self) -> str:
        return self.value
