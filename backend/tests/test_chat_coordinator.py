"""Tests for ChatCoordinator orchestration between the directory and room store."""

import anyio
import pytest

from chatrooms.domain.entities import MessageState
from chatrooms.domain.exceptions import (
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
)
from chatrooms.domain.value_objects import MessageId, RoomId

pytestmark = pytest.mark.anyio


@pytest.fixture
async def room_with_alice(coordinator, user_directory):
    await user_directory.register("alice")
    room_id = await coordinator.create_room()
    await coordinator.add_user_to_room(room_id, "alice")
    return room_id


# ==================== ROOMS ====================


async def test_create_and_list_rooms(coordinator):
    first = await coordinator.create_room()
    second = await coordinator.create_room()

    assert await coordinator.list_rooms() == [first, second]


async def test_new_room_view_is_empty(coordinator):
    room_id = await coordinator.create_room()

    view = await coordinator.get_room_view(room_id)
    assert view.id == room_id.value
    assert view.members == []
    assert view.messages == []


async def test_unknown_room_view_not_found(coordinator):
    with pytest.raises(EntityNotFoundError):
        await coordinator.get_room_view(RoomId.generate())


async def test_malformed_room_id_rejected(coordinator):
    with pytest.raises(DomainValidationError):
        await coordinator.get_room_view("not-a-room")


# ==================== MEMBERSHIP ====================


async def test_add_registered_user(coordinator, user_directory):
    await user_directory.register("Bob")
    room_id = await coordinator.create_room()

    view = await coordinator.add_user_to_room(room_id, "bob")

    assert [m.username for m in view.members] == ["Bob"]


async def test_add_unregistered_user_not_found(coordinator):
    room_id = await coordinator.create_room()

    with pytest.raises(EntityNotFoundError):
        await coordinator.add_user_to_room(room_id, "ghost")
    assert (await coordinator.get_room_view(room_id)).members == []


async def test_add_user_to_unknown_room_not_found(coordinator, user_directory):
    await user_directory.register("alice")

    with pytest.raises(EntityNotFoundError):
        await coordinator.add_user_to_room(RoomId.generate(), "alice")


async def test_add_blank_username_rejected(coordinator):
    room_id = await coordinator.create_room()

    with pytest.raises(DomainValidationError):
        await coordinator.add_user_to_room(room_id, "  ")


async def test_add_member_twice_conflicts(coordinator, room_with_alice):
    with pytest.raises(ConflictError):
        await coordinator.add_user_to_room(room_with_alice, "ALICE")

    view = await coordinator.get_room_view(room_with_alice)
    assert len(view.members) == 1


async def test_concurrent_adds_of_same_user_admit_exactly_one(
    coordinator, user_directory
):
    await user_directory.register("dave")
    room_id = await coordinator.create_room()
    outcomes = []

    async def join():
        try:
            await coordinator.add_user_to_room(room_id, "dave")
        except ConflictError:
            outcomes.append("conflict")
        else:
            outcomes.append("added")

    async with anyio.create_task_group() as tg:
        for _ in range(10):
            tg.start_soon(join)

    assert outcomes.count("added") == 1
    assert outcomes.count("conflict") == 9
    assert len((await coordinator.get_room_view(room_id)).members) == 1


async def test_concurrent_adds_of_different_users_all_land(coordinator, user_directory):
    names = [f"user{i}" for i in range(10)]
    for name in names:
        await user_directory.register(name)
    room_id = await coordinator.create_room()

    async with anyio.create_task_group() as tg:
        for name in names:
            tg.start_soon(coordinator.add_user_to_room, room_id, name)

    view = await coordinator.get_room_view(room_id)
    assert sorted(m.username for m in view.members) == sorted(names)


# ==================== MESSAGES ====================


async def test_send_message_round_trip(coordinator, room_with_alice):
    sent = await coordinator.send_message(room_with_alice, "alice", "hello")

    assert sent.sender == "alice"
    assert sent.content == "hello"
    assert sent.edited is False

    view = await coordinator.get_room_view(room_with_alice)
    assert [m.username for m in view.members] == ["alice"]
    assert [m.content for m in view.messages] == ["hello"]
    assert view.messages[0].id == sent.id


async def test_send_message_keeps_client_id(coordinator, room_with_alice):
    message_id = MessageId.generate()

    sent = await coordinator.send_message(
        room_with_alice, "alice", "hi", message_id=message_id.value
    )
    assert sent.id == message_id.value


async def test_duplicate_message_id_conflicts(coordinator, room_with_alice):
    message_id = MessageId.generate()
    await coordinator.send_message(room_with_alice, "alice", "one", message_id)

    with pytest.raises(ConflictError):
        await coordinator.send_message(room_with_alice, "alice", "two", message_id)
    assert len((await coordinator.get_room_view(room_with_alice)).messages) == 1


@pytest.mark.parametrize("content", ["", "   "])
async def test_blank_content_rejected(coordinator, room_with_alice, content):
    with pytest.raises(DomainValidationError):
        await coordinator.send_message(room_with_alice, "alice", content)
    assert (await coordinator.get_room_view(room_with_alice)).messages == []


async def test_blank_sender_rejected(coordinator, room_with_alice):
    with pytest.raises(DomainValidationError):
        await coordinator.send_message(room_with_alice, "", "hi")


async def test_unregistered_sender_not_found(coordinator, room_with_alice):
    with pytest.raises(EntityNotFoundError):
        await coordinator.send_message(room_with_alice, "ghost", "boo")


async def test_non_member_cannot_send(coordinator, user_directory, room_with_alice):
    await user_directory.register("mallory")

    with pytest.raises(ConflictError):
        await coordinator.send_message(room_with_alice, "mallory", "let me in")
    assert (await coordinator.get_room_view(room_with_alice)).messages == []


async def test_send_to_unknown_room_not_found(coordinator, user_directory):
    await user_directory.register("alice")

    with pytest.raises(EntityNotFoundError):
        await coordinator.send_message(RoomId.generate(), "alice", "hi")


async def test_concurrent_sends_keep_every_message(coordinator, room_with_alice):
    async with anyio.create_task_group() as tg:
        for i in range(20):
            tg.start_soon(coordinator.send_message, room_with_alice, "alice", f"m{i}")

    view = await coordinator.get_room_view(room_with_alice)
    assert sorted(m.content for m in view.messages) == sorted(
        f"m{i}" for i in range(20)
    )


async def test_deleted_user_stays_member(coordinator, user_directory, room_with_alice):
    await user_directory.delete("alice")

    view = await coordinator.get_room_view(room_with_alice)
    assert [m.username for m in view.members] == ["alice"]
    # The sender must still be registered to post
    with pytest.raises(EntityNotFoundError):
        await coordinator.send_message(room_with_alice, "alice", "still here?")


# ==================== EDITS ====================


async def test_edit_by_sender(coordinator, room_with_alice):
    sent = await coordinator.send_message(room_with_alice, "alice", "helo")

    edited = await coordinator.edit_message(room_with_alice, sent.id, "ALICE", "hello")

    assert edited.content == "hello"
    assert edited.edited is True
    assert edited.edited_at is not None
    assert edited.sent_at == sent.sent_at


async def test_edit_with_same_content_changes_nothing(coordinator, room_with_alice):
    sent = await coordinator.send_message(room_with_alice, "alice", "hello")

    edited = await coordinator.edit_message(room_with_alice, sent.id, "alice", "hello")

    assert edited.edited is False
    assert edited.edited_at is None


async def test_edit_by_other_member_conflicts(
    coordinator, user_directory, room_with_alice
):
    await user_directory.register("bob")
    await coordinator.add_user_to_room(room_with_alice, "bob")
    sent = await coordinator.send_message(room_with_alice, "alice", "mine")

    with pytest.raises(ConflictError):
        await coordinator.edit_message(room_with_alice, sent.id, "bob", "yours")

    view = await coordinator.get_room_view(room_with_alice)
    assert view.messages[0].content == "mine"


async def test_edit_unknown_message_not_found(coordinator, room_with_alice):
    with pytest.raises(EntityNotFoundError):
        await coordinator.edit_message(
            room_with_alice, MessageId.generate(), "alice", "x"
        )


async def test_blank_edit_rejected(coordinator, room_with_alice):
    sent = await coordinator.send_message(room_with_alice, "alice", "hello")

    with pytest.raises(DomainValidationError):
        await coordinator.edit_message(room_with_alice, sent.id, "alice", " ")


async def test_message_state_after_edit(coordinator, room_store, room_with_alice):
    sent = await coordinator.send_message(room_with_alice, "alice", "a")
    await coordinator.edit_message(room_with_alice, sent.id, "alice", "b")

    room = await room_store.get(room_with_alice)
    assert room.find_message(MessageId(sent.id)).state is MessageState.EDITED
