# tests/test_commands.py

from __future__ import annotations

import pytest

from task_board.cli.commands import CommandRegistry, parse_status_arg, registry
from task_board.core.state import BoardState
from task_board.tasks.task_models import TaskStatus

from .fakes import FakeTaskService


@pytest.mark.asyncio
async def test_command_registry_routes_and_aliases(state: BoardState) -> None:
    reg = CommandRegistry()
    called: list[str] = []

    async def handler(state, args):
        called.append(args)
        return "ok"

    reg.register("a", handler, "a", aliases=["alpha"])

    assert await reg.handle(state, "/a  x y ") == "ok"
    assert await reg.handle(state, "/ALPHA") == "ok"
    assert called == ["x y", ""]


@pytest.mark.asyncio
async def test_command_registry_unknown_and_non_command(state: BoardState) -> None:
    reg = CommandRegistry()
    assert await reg.handle(state, "hello") is None
    assert "Unknown command" in (await reg.handle(state, "/nope") or "")
    assert "Empty command" in (await reg.handle(state, "/") or "")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("todo", TaskStatus.TODO),
        ("In Progress", TaskStatus.IN_PROGRESS),
        ("in-progress", TaskStatus.IN_PROGRESS),
        ("DONE", TaskStatus.DONE),
        ("later", None),
    ],
)
def test_parse_status_arg(raw: str, expected) -> None:
    assert parse_status_arg(raw) == expected


@pytest.mark.asyncio
async def test_add_move_and_remove_flow(state: BoardState, service: FakeTaskService) -> None:
    await state.store.load()

    reply = await registry.handle(state, "/add Write tests | with fakes")
    assert reply == "Created #100 [Todo] Write tests  - with fakes"

    reply = await registry.handle(state, "/move 100 in-progress")
    assert reply is not None and reply.startswith("Moved #100 [In Progress]")

    reply = await registry.handle(state, "/rm 1")
    assert reply == "Deleted task 1."
    assert [t.id for t in state.store.tasks] == [100, 2]


@pytest.mark.asyncio
async def test_blank_add_reports_validation_error(state: BoardState, service: FakeTaskService) -> None:
    await state.store.load()

    assert await registry.handle(state, "/add    ") == "Error: Title is required"
    assert service.calls_for("create") == []


@pytest.mark.asyncio
async def test_noop_move_does_not_repeat_old_error(state: BoardState, service: FakeTaskService) -> None:
    await state.store.load()
    service.fail.add("delete")
    assert await registry.handle(state, "/rm 2") == "Error: Failed to delete task"

    assert await registry.handle(state, "/move 1 todo") == "Task 1 not moved."


@pytest.mark.asyncio
async def test_snapshot_then_drop(state: BoardState, service: FakeTaskService) -> None:
    await state.store.load()

    payload = await registry.handle(state, "/snapshot 1")
    assert payload is not None

    assert await registry.handle(state, f"/drop todo {payload}") == "Dropped; nothing to do."
    reply = await registry.handle(state, f"/drop done {payload}")
    assert reply is not None and reply.startswith("Moved #1 [Done]")
    assert service.calls_for("status") == [(1, "Done")]


@pytest.mark.asyncio
async def test_board_and_status_render(state: BoardState) -> None:
    assert await registry.handle(state, "/board") == "Loading tasks..."

    await state.store.load()
    board = await registry.handle(state, "/board") or ""

    assert "== Todo (1)" in board
    assert "== In Progress (0)" in board
    assert "== Done (1)" in board
    status = await registry.handle(state, "/status") or ""
    assert "Tasks: 2 (Todo: 1, In Progress: 0, Done: 1)" in status
    assert "Error: -" in status


@pytest.mark.asyncio
async def test_edit_without_bar_keeps_description(state: BoardState, service: FakeTaskService) -> None:
    await state.store.load()

    reply = await registry.handle(state, "/edit 2 B2")

    assert reply == "Updated #2 [Done] B2 - second"
    assert service.calls_for("update") == [(2, {"title": "B2"})]
    task = state.store.get(2)
    assert task is not None and task.description == "second"


@pytest.mark.asyncio
async def test_edit_with_empty_description_clears_it(state: BoardState, service: FakeTaskService) -> None:
    await state.store.load()

    await registry.handle(state, "/edit 2 B2 |")

    assert service.calls_for("update") == [(2, {"title": "B2 ", "description": ""})]
