from datetime import datetime, timedelta

import pytest

from todo_api import repository as repository_module
from todo_api.services import todo_service


@pytest.fixture
async def users(repo):
    alice = await repo.create_user("alice", "alice@example.com", "s:d")
    bob = await repo.create_user("bob", "bob@example.com", "s:d")
    return alice, bob


@pytest.fixture
def clock(monkeypatch):
    """Controllable repository clock; advance with ``clock.tick()``."""

    class Clock:
        now = datetime(2024, 1, 1, 12, 0, 0)

        def tick(self, seconds=1):
            self.now += timedelta(seconds=seconds)

    fake = Clock()
    monkeypatch.setattr(repository_module, "utcnow", lambda: fake.now)
    return fake


@pytest.mark.asyncio
async def test_create_defaults(repo, users, clock):
    alice, _ = users
    todo = await todo_service.create_todo(repo, "buy milk", alice.id)

    assert todo.id > 0
    assert todo.user_id == alice.id
    assert todo.text == "buy milk"
    assert todo.completed is False
    assert todo.due_date is None
    assert todo.created_at == todo.updated_at == clock.now


@pytest.mark.asyncio
async def test_list_newest_first(repo, users, clock):
    alice, _ = users
    first = await todo_service.create_todo(repo, "first", alice.id)
    clock.tick()
    second = await todo_service.create_todo(repo, "second", alice.id)
    clock.tick()
    third = await todo_service.create_todo(repo, "third", alice.id)

    todos = await todo_service.list_todos(repo, alice.id)
    assert [t.id for t in todos] == [third.id, second.id, first.id]


@pytest.mark.asyncio
async def test_list_same_second_falls_back_to_id(repo, users, clock):
    alice, _ = users
    first = await todo_service.create_todo(repo, "first", alice.id)
    second = await todo_service.create_todo(repo, "second", alice.id)

    todos = await todo_service.list_todos(repo, alice.id)
    assert [t.id for t in todos] == [second.id, first.id]


@pytest.mark.asyncio
async def test_list_only_own_todos(repo, users):
    alice, bob = users
    await todo_service.create_todo(repo, "alice's", alice.id)
    await todo_service.create_todo(repo, "bob's", bob.id)

    assert [t.text for t in await todo_service.list_todos(repo, alice.id)] == ["alice's"]
    assert [t.text for t in await todo_service.list_todos(repo, bob.id)] == ["bob's"]


@pytest.mark.asyncio
async def test_update_overwrites_and_keeps_created_at(repo, users, clock):
    alice, _ = users
    todo = await todo_service.create_todo(repo, "draft", alice.id)
    created_at = todo.created_at

    clock.tick(60)
    updated = await todo_service.update_todo(repo, todo.id, "final", True, alice.id)

    assert updated.text == "final"
    assert updated.completed is True
    assert updated.created_at == created_at
    assert updated.updated_at == clock.now
    assert updated.updated_at != created_at


@pytest.mark.asyncio
async def test_other_user_cannot_touch_todo(repo, users):
    alice, bob = users
    todo = await todo_service.create_todo(repo, "private", alice.id)

    assert await todo_service.get_todo(repo, todo.id, bob.id) is None
    assert await todo_service.update_todo(repo, todo.id, "mine now", True, bob.id) is None
    assert await todo_service.delete_todo(repo, todo.id, bob.id) is False

    still_there = await todo_service.get_todo(repo, todo.id, alice.id)
    assert still_there.text == "private"
    assert still_there.completed is False


@pytest.mark.asyncio
async def test_missing_todo(repo, users):
    alice, _ = users
    assert await todo_service.get_todo(repo, 12345, alice.id) is None
    assert await todo_service.update_todo(repo, 12345, "x", False, alice.id) is None
    assert await todo_service.delete_todo(repo, 12345, alice.id) is False


@pytest.mark.asyncio
async def test_delete_removes_from_list(repo, users):
    alice, _ = users
    keep = await todo_service.create_todo(repo, "keep", alice.id)
    drop = await todo_service.create_todo(repo, "drop", alice.id)

    assert await todo_service.delete_todo(repo, drop.id, alice.id) is True
    assert [t.id for t in await todo_service.list_todos(repo, alice.id)] == [keep.id]
    assert await todo_service.delete_todo(repo, drop.id, alice.id) is False
