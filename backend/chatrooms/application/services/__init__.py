"""Application services."""

from chatrooms.application.services.chat_coordinator import ChatCoordinator

__all__ = ["ChatCoordinator"]
