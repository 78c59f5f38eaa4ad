# src/task_board/core/ports.py

"""
Ports (interfaces) used by the core.

The store depends on a Protocol instead of the concrete HTTP client.
This keeps the remote service swappable and makes testing easier.
"""

from __future__ import annotations

from typing import Any, Protocol

from ..tasks.task_models import Task, TaskId


class TaskService(Protocol):
    """
    Remote task service.

    Every method raises RemoteFailure on any non-success outcome.
    """

    async def fetch_tasks(self) -> list[Task]: ...

    async def create_task(self, title: str, description: str) -> Task: ...

    async def update_task(self, task_id: TaskId, updates: dict[str, Any]) -> Task: ...

    async def update_task_status(self, task_id: TaskId, status: str) -> Task: ...

    async def delete_task(self, task_id: TaskId) -> None: ...
