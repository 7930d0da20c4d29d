"""Tests for InMemoryUserDirectory."""

import pytest

from chatrooms.domain.exceptions import DomainValidationError

pytestmark = pytest.mark.anyio


async def test_register_and_lookup(user_directory):
    user = await user_directory.register("Alice", b"\x89PNG")

    found = await user_directory.lookup("alice")
    assert found is user
    assert found.username.value == "Alice"
    assert found.photo == b"\x89PNG"


async def test_register_replaces_existing_user(user_directory):
    await user_directory.register("alice", b"old")
    replacement = await user_directory.register("ALICE", None)

    users = await user_directory.list()
    assert len(users) == 1
    assert users[0] is replacement
    assert users[0].username.value == "ALICE"
    assert await user_directory.get_photo("alice") is None


async def test_non_case_variants_are_distinct_users(user_directory):
    await user_directory.register("Straße", b"p1")
    await user_directory.register("STRASSE")

    users = await user_directory.list()
    assert [u.username.value for u in users] == ["Straße", "STRASSE"]
    assert await user_directory.get_photo("straße") == b"p1"
    assert await user_directory.get_photo("strasse") is None


async def test_exists_ignores_case(user_directory):
    await user_directory.register("Bob")

    assert await user_directory.exists("bob") is True
    assert await user_directory.exists("BOB") is True
    assert await user_directory.exists("carol") is False


async def test_lookup_unknown_returns_none(user_directory):
    assert await user_directory.lookup("nobody") is None


async def test_delete(user_directory):
    await user_directory.register("bob")

    assert await user_directory.delete("BOB") is True
    assert await user_directory.exists("bob") is False
    assert await user_directory.delete("bob") is False


async def test_list_is_a_snapshot(user_directory):
    await user_directory.register("alice")
    snapshot = await user_directory.list()

    await user_directory.register("bob")

    assert [u.username.value for u in snapshot] == ["alice"]
    assert len(await user_directory.list()) == 2


async def test_get_photo(user_directory):
    await user_directory.register("alice", b"jpeg-bytes")
    await user_directory.register("bob")

    assert await user_directory.get_photo("ALICE") == b"jpeg-bytes"
    assert await user_directory.get_photo("bob") is None
    assert await user_directory.get_photo("nobody") is None


@pytest.mark.parametrize("username", ["", "   "])
async def test_blank_username_rejected(user_directory, username):
    with pytest.raises(DomainValidationError):
        await user_directory.register(username)
    with pytest.raises(DomainValidationError):
        await user_directory.lookup(username)
    assert await user_directory.list() == ()
