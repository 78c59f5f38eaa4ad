# src/task_board/tasks/transitions.py

"""
Status transitions.

The three stages form a fully connected graph: any stage can move to either
of the other two, and none is terminal. Both entry points (explicit move and
drop) end up in TaskStore.change_status; the service's answer is what lands
in the list.

Same-stage requests never reach the network:
- move() compares against the store's current status;
- drop() compares against the snapshot taken at drag-start. If the task was
  moved while being dragged, the snapshot is stale and the drop is judged on
  it anyway (a drop onto the column the task was moved to still goes out).
"""

from __future__ import annotations

import logging
from typing import Any

from .task_models import STATUSES, DropMessage, Task, TaskId, TaskStatus, parse_snapshot
from .task_store import TaskStore

logger = logging.getLogger(__name__)


def available_targets(status: str) -> list[TaskStatus]:
    """Stages a task in `status` can be moved to (all the others)."""
    return [s for s in STATUSES if s != status]


async def move(store: TaskStore, task_id: TaskId, target_status: str) -> Task | None:
    """
    Move a task to `target_status`.

    Returns the updated task, or None when nothing was sent or the call failed.
    """
    target = TaskStatus.parse(target_status)
    if target is None:
        logger.warning("Ignoring move of id=%s to unknown status %r", task_id, target_status)
        return None

    current = store.get(task_id)
    if current is not None and current.status == target:
        logger.debug("Task id=%s already in %s; nothing to do.", task_id, target)
        return None

    return await store.change_status(task_id, target)


async def apply_drop(store: TaskStore, message: DropMessage) -> Task | None:
    if TaskStatus.parse(message.target_status) is None:
        logger.warning("Drop onto unknown status %r ignored.", message.target_status)
        return None
    if message.snapshot_status == message.target_status:
        logger.debug("Task id=%s dropped on its own column.", message.task_id)
        return None
    # The snapshot alone decides; the store's live status is not consulted.
    return await store.change_status(message.task_id, message.target_status)


async def drop(store: TaskStore, payload: Any, target_status: str) -> Task | None:
    """
    Handle a drag released over the `target_status` column.

    `payload` is whatever the drag carried (normally snapshot_task() output).
    Missing or unreadable payloads are ignored.
    """
    snapshot = parse_snapshot(payload)
    if snapshot is None:
        logger.debug("Drop without a usable task payload ignored.")
        return None

    message = DropMessage(
        task_id=snapshot.id,
        snapshot_status=snapshot.status,
        target_status=str(target_status),
    )
    return await apply_drop(store, message)
