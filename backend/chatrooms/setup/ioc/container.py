"""
Dishka DI Container Setup.

- Registers the in-memory stores and the ChatCoordinator
- Maps abstract ports to concrete implementations
- Manages lifecycle (Scope.APP = singleton, Scope.REQUEST = per-request)

Flow:
  Container → provides → InMemoryRoomStore ─┐
                          InMemoryUserDirectory ─┴→ ChatCoordinator
"""

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from chatrooms.application.services.chat_coordinator import ChatCoordinator
from chatrooms.config.settings import get_config
from chatrooms.domain.ports.repositories import RoomStore, UserDirectory
from chatrooms.infrastructure.persistence import (
    InMemoryRoomStore,
    InMemoryUserDirectory,
)


class AppProvider(Provider):
    """
    Application dependency provider.

    The stores are the process-wide shared state, so they are APP-scoped:
    created ONCE per container and shared across all requests.
    """

    # ==================== STORES ====================

    @provide(scope=Scope.APP)
    def get_user_directory(self) -> UserDirectory:
        """
        Provide UserDirectory implementation.

        - Return type is ABSTRACT (UserDirectory)
        - Implementation is CONCRETE (InMemoryUserDirectory)
        """
        return InMemoryUserDirectory()

    @provide(scope=Scope.APP)
    def get_room_store(self) -> RoomStore:
        return InMemoryRoomStore(lock_timeout=get_config().ROOM_LOCK_TIMEOUT)

    # ==================== SERVICES ====================

    @provide(scope=Scope.REQUEST)
    def get_chat_coordinator(
        self, room_store: RoomStore, user_directory: UserDirectory
    ) -> ChatCoordinator:
        return ChatCoordinator(room_store=room_store, user_directory=user_directory)


def create_container() -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this once per application instance; each container owns its own stores.
    """
    return make_async_container(AppProvider())
