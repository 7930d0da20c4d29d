"""
DomainValidationError - Raised for malformed input (blank username, blank content,
blank or malformed identifier). Always raised before any mutation.
Maps to: HTTP 400 Bad Request
"""


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
