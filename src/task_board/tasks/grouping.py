# src/task_board/tasks/grouping.py

from __future__ import annotations

from collections.abc import Iterable

from .task_models import STATUSES, Task, TaskStatus
from .task_store import TaskStore


def group_by_status(tasks: Iterable[Task]) -> dict[TaskStatus, list[Task]]:
    """
    Split tasks into the three stage buckets, keeping list order in each.

    Tasks with an unknown status end up in no bucket.
    """
    groups: dict[TaskStatus, list[Task]] = {s: [] for s in STATUSES}
    for t in tasks:
        status = t.known_status
        if status is not None:
            groups[status].append(t)
    return groups


def bucket_counts(groups: dict[TaskStatus, list[Task]]) -> dict[TaskStatus, int]:
    return {s: len(groups.get(s, ())) for s in STATUSES}


class BoardView:
    """Read-only grouped view over a TaskStore, recomputed when the list changes."""

    def __init__(self, store: TaskStore) -> None:
        self._store = store
        self._version = -1
        self._groups: dict[TaskStatus, list[Task]] = {s: [] for s in STATUSES}

    @property
    def groups(self) -> dict[TaskStatus, list[Task]]:
        if self._version != self._store.version:
            self._groups = group_by_status(self._store.tasks)
            self._version = self._store.version
        return {s: list(items) for s, items in self._groups.items()}

    @property
    def counts(self) -> dict[TaskStatus, int]:
        return bucket_counts(self.groups)
