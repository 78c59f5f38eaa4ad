# src/task_board/tasks/task_store.py

from __future__ import annotations

import logging

from ..core.errors import BoardError, RemoteFailure, ValidationError
from ..core.ports import TaskService
from .task_models import Task, TaskId

logger = logging.getLogger(__name__)

TITLE_REQUIRED = "Title is required"


class TaskStore:
    """
    In-memory task list mirrored from the remote task service.

    Rules:
    - the list only changes after the remote call for it succeeded (no optimistic edits)
    - every failure goes into the single `error` slot, nothing is raised to callers
    - any successful operation clears `error`
    - new tasks are prepended, everything else keeps relative order

    Operations are not serialized against each other: responses are applied in
    arrival order, so with overlapping calls the last response wins.
    """

    def __init__(self, service: TaskService) -> None:
        self._service = service
        self._tasks: list[Task] = []
        self.loading: bool = True
        self.error: str | None = None
        # The exception behind `error`, for callers that need the kind.
        self.last_failure: BoardError | None = None
        # Bumped each time the list is replaced; views cache against it.
        self.version: int = 0

    # ---- read side ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def get(self, task_id: TaskId) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def clear_error(self) -> None:
        self.error = None
        self.last_failure = None

    # ---- internal helpers ----

    def _set_tasks(self, tasks: list[Task]) -> None:
        self._tasks = tasks
        self.version += 1

    def _fail(self, exc: BoardError) -> None:
        self.error = str(exc)
        self.last_failure = exc

    # ---- operations ----

    async def load(self) -> None:
        """Fetch the whole list and replace local state with it."""
        self.loading = True
        try:
            tasks = await self._service.fetch_tasks()
        except RemoteFailure as e:
            self.loading = False
            self._fail(e)
            logger.warning("Task load failed: %s", e)
            return

        self._set_tasks(list(tasks))
        self.loading = False
        self.clear_error()
        logger.info("Loaded %d tasks.", len(tasks))

    async def create(self, title: str, description: str = "") -> Task | None:
        """
        Create a task. The title must not be blank; it is sent untrimmed.

        Returns the server's task, or None on failure (see `error`).
        """
        if not (title or "").strip():
            self._fail(ValidationError(TITLE_REQUIRED))
            logger.debug("Create rejected: blank title.")
            return None

        self.clear_error()
        try:
            created = await self._service.create_task(title, description)
        except RemoteFailure as e:
            self._fail(e)
            logger.warning("Task create failed: %s", e)
            return None

        self._set_tasks([created, *self._tasks])
        logger.info("Created task id=%s status=%s", created.id, created.status)
        return created

    async def change_status(self, task_id: TaskId, new_status: str) -> Task | None:
        """
        Ask the service to move a task; on success the server's copy replaces ours.

        An id no longer in the list (e.g. deleted meanwhile) is left alone.
        """
        try:
            updated = await self._service.update_task_status(task_id, str(new_status))
        except RemoteFailure as e:
            self._fail(e)
            logger.warning("Status change failed id=%s -> %s: %s", task_id, new_status, e)
            return None

        self._replace(task_id, updated)
        self.clear_error()
        logger.info("Task id=%s moved to %s", task_id, updated.status)
        return updated

    async def edit(
        self,
        task_id: TaskId,
        *,
        title: str | None = None,
        description: str | None = None,
    ) -> Task | None:
        """Update title and/or description through the full-update endpoint."""
        updates: dict[str, str] = {}
        if title is not None:
            if not title.strip():
                self._fail(ValidationError(TITLE_REQUIRED))
                return None
            updates["title"] = title
        if description is not None:
            updates["description"] = description
        if not updates:
            return self.get(task_id)

        try:
            updated = await self._service.update_task(task_id, updates)
        except RemoteFailure as e:
            self._fail(e)
            logger.warning("Task edit failed id=%s: %s", task_id, e)
            return None

        self._replace(task_id, updated)
        self.clear_error()
        logger.info("Task id=%s edited (%s)", task_id, ", ".join(sorted(updates)))
        return updated

    async def remove(self, task_id: TaskId) -> bool:
        """Delete a task remotely, then drop it locally. False if the service refused."""
        try:
            await self._service.delete_task(task_id)
        except RemoteFailure as e:
            self._fail(e)
            logger.warning("Task delete failed id=%s: %s", task_id, e)
            return False

        remaining = [t for t in self._tasks if t.id != task_id]
        if len(remaining) != len(self._tasks):
            self._set_tasks(remaining)
        self.clear_error()
        logger.info("Task id=%s deleted", task_id)
        return True

    def _replace(self, task_id: TaskId, task: Task) -> None:
        if self.get(task_id) is None:
            logger.debug("Task id=%s not in list anymore; response ignored.", task_id)
            return
        self._set_tasks([task if t.id == task_id else t for t in self._tasks])
