# tests/test_grouping.py

from __future__ import annotations

import pytest

from task_board.core.state import BoardState
from task_board.tasks.grouping import BoardView, bucket_counts, group_by_status
from task_board.tasks.task_models import Task, TaskStatus
from task_board.tasks.task_store import TaskStore

from .fakes import FakeTaskService


def _task(task_id: int, status: str) -> Task:
    return Task(id=task_id, title=f"t{task_id}", description="", status=status)


def test_grouping_keeps_order_and_drops_unknown_statuses() -> None:
    tasks = [
        _task(1, "Done"),
        _task(2, "Todo"),
        _task(3, "Archived"),
        _task(4, "Todo"),
        _task(5, "In Progress"),
        _task(6, ""),
    ]

    groups = group_by_status(tasks)

    assert list(groups) == [TaskStatus.TODO, TaskStatus.IN_PROGRESS, TaskStatus.DONE]
    assert [t.id for t in groups[TaskStatus.TODO]] == [2, 4]
    assert [t.id for t in groups[TaskStatus.IN_PROGRESS]] == [5]
    assert [t.id for t in groups[TaskStatus.DONE]] == [1]
    assert sum(bucket_counts(groups).values()) == 4


def test_grouping_empty_list_has_all_buckets() -> None:
    groups = group_by_status([])
    assert bucket_counts(groups) == {s: 0 for s in TaskStatus}


@pytest.mark.asyncio
async def test_load_scenario_buckets(state: BoardState) -> None:
    await state.store.load()

    groups = state.view.groups
    assert [t.id for t in groups[TaskStatus.TODO]] == [1]
    assert groups[TaskStatus.IN_PROGRESS] == []
    assert [t.id for t in groups[TaskStatus.DONE]] == [2]
    assert state.store.error is None
    assert state.store.loading is False


@pytest.mark.asyncio
async def test_view_follows_store_changes_and_keeps_unknown_addressable() -> None:
    service = FakeTaskService(
        [
            {"id": "a", "title": "A", "description": "", "status": "Todo"},
            {"id": "b", "title": "B", "description": "", "status": "Legacy"},
        ]
    )
    store = TaskStore(service)
    view = BoardView(store)

    assert view.counts == {s: 0 for s in TaskStatus}

    await store.load()
    assert view.counts[TaskStatus.TODO] == 1
    assert sum(view.counts.values()) == 1

    # Hidden from buckets, still in the list and still deletable.
    assert store.get("b") is not None
    await store.remove("b")
    assert [t.id for t in store.tasks] == ["a"]

    await store.change_status("a", "Done")
    assert view.counts == {TaskStatus.TODO: 0, TaskStatus.IN_PROGRESS: 0, TaskStatus.DONE: 1}


@pytest.mark.asyncio
async def test_view_result_is_a_copy(state: BoardState) -> None:
    await state.store.load()

    state.view.groups[TaskStatus.TODO].clear()

    assert len(state.view.groups[TaskStatus.TODO]) == 1
    assert len(state.store.tasks) == 2
