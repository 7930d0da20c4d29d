import os
import sys

import pytest

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient

from chatrooms.application.services.chat_coordinator import ChatCoordinator
from chatrooms.fastapi_app import create_fastapi_app
from chatrooms.infrastructure.persistence import (
    InMemoryRoomStore,
    InMemoryUserDirectory,
)

# Short lock wait so contention tests finish quickly
TEST_LOCK_TIMEOUT = 0.2


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def app():
    """Create a new FastAPI app (with fresh in-memory stores) for each test."""
    return create_fastapi_app()


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def user_directory():
    return InMemoryUserDirectory()


@pytest.fixture()
def room_store():
    return InMemoryRoomStore(lock_timeout=TEST_LOCK_TIMEOUT)


@pytest.fixture()
def coordinator(room_store, user_directory):
    return ChatCoordinator(room_store=room_store, user_directory=user_directory)
