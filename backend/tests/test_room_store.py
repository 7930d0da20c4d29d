"""Tests for InMemoryRoomStore and its per-room exclusive mutation."""

import anyio
import pytest

from chatrooms.domain.entities import User
from chatrooms.domain.exceptions import EntityNotFoundError, RoomBusyError
from chatrooms.domain.value_objects import RoomId

pytestmark = pytest.mark.anyio


async def test_create_get_list(room_store):
    first = await room_store.create()
    second = await room_store.create()

    assert first.id != second.id
    assert await room_store.get(first.id) is first
    assert [room.id for room in await room_store.list()] == [first.id, second.id]


async def test_get_unknown_room_returns_none(room_store):
    assert await room_store.get(RoomId.generate()) is None


async def test_list_is_a_snapshot(room_store):
    await room_store.create()
    snapshot = await room_store.list()
    await room_store.create()

    assert len(snapshot) == 1
    assert len(await room_store.list()) == 2


async def test_mutate_returns_action_result(room_store):
    room = await room_store.create()

    added = await room_store.mutate_exclusively(
        room.id, lambda r: r.add_member(User(username="alice"))
    )

    assert added is True
    assert room.is_member("alice")


async def test_mutate_awaits_async_action(room_store):
    room = await room_store.create()

    async def action(r):
        await anyio.sleep(0)
        return r.add_member(User(username="bob"))

    assert await room_store.mutate_exclusively(room.id, action) is True


async def test_mutate_unknown_room_raises(room_store):
    calls = []

    with pytest.raises(EntityNotFoundError):
        await room_store.mutate_exclusively(RoomId.generate(), calls.append)
    assert calls == []


async def test_mutations_on_one_room_do_not_overlap(room_store):
    room = await room_store.create()
    active = 0
    max_active = 0

    async def action(r):
        nonlocal active, max_active
        active += 1
        max_active = max(max_active, active)
        await anyio.sleep(0.01)
        active -= 1

    async with anyio.create_task_group() as tg:
        for _ in range(5):
            tg.start_soon(room_store.mutate_exclusively, room.id, action)

    assert max_active == 1


async def test_other_rooms_are_not_blocked(room_store):
    busy = await room_store.create()
    free = await room_store.create()
    release = anyio.Event()

    async def hold(r):
        await release.wait()

    async with anyio.create_task_group() as tg:
        tg.start_soon(room_store.mutate_exclusively, busy.id, hold)
        await anyio.sleep(0.01)

        added = await room_store.mutate_exclusively(
            free.id, lambda r: r.add_member(User(username="carol"))
        )
        assert added is True
        # Reads never wait on the lock
        assert await room_store.get(busy.id) is busy

        release.set()


async def test_lock_timeout_raises_room_busy(room_store):
    room = await room_store.create()
    release = anyio.Event()
    calls = []

    async def hold(r):
        await release.wait()

    async with anyio.create_task_group() as tg:
        tg.start_soon(room_store.mutate_exclusively, room.id, hold)
        await anyio.sleep(0.01)

        with pytest.raises(RoomBusyError):
            await room_store.mutate_exclusively(room.id, calls.append)

        release.set()

    assert calls == []
    # The lock is usable again once the holder finished
    assert await room_store.mutate_exclusively(room.id, lambda r: "ok") == "ok"


async def test_lock_released_when_action_raises(room_store):
    room = await room_store.create()

    def boom(r):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await room_store.mutate_exclusively(room.id, boom)

    assert await room_store.mutate_exclusively(room.id, lambda r: 1) == 1
