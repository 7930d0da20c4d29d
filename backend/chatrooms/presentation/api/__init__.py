"""
API Routers - FastAPI endpoint definitions.
"""

from chatrooms.presentation.api.chat import router as chat_router
from chatrooms.presentation.api.users import router as users_router

__all__ = [
    "chat_router",
    "users_router",
]
