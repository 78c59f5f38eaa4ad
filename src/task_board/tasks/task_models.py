# src/task_board/tasks/task_models.py

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)

# Server-assigned and opaque: the service may use integers or strings.
TaskId = int | str

_CORE_FIELDS = ("id", "title", "description", "status")


class TaskStatus(StrEnum):
    """
    Board stage.

    The wire value is also the display label, so a task payload can be
    compared against these members directly.
    """

    TODO = "Todo"
    IN_PROGRESS = "In Progress"
    DONE = "Done"

    @classmethod
    def parse(cls, raw: Any) -> TaskStatus | None:
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValueError:
            return None


STATUSES: tuple[TaskStatus, ...] = (TaskStatus.TODO, TaskStatus.IN_PROGRESS, TaskStatus.DONE)


@dataclass(slots=True)
class Task:
    id: TaskId
    title: str
    description: str
    status: str

    # Whatever else the service sends (timestamps etc.), kept verbatim.
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def known_status(self) -> TaskStatus | None:
        return TaskStatus.parse(self.status)

    @classmethod
    def from_api(cls, data: Any) -> Task:
        """Build a Task from a service payload. Raises ValueError/TypeError on bad shape."""
        if not isinstance(data, Mapping):
            raise TypeError(f"task payload must be an object, got {type(data).__name__}")
        if data.get("id") is None:
            raise ValueError("task payload has no id")

        status = data.get("status")
        return cls(
            id=data["id"],
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            status=str(status) if status is not None else "",
            extra={k: v for k, v in data.items() if k not in _CORE_FIELDS},
        )

    def to_api(self) -> dict[str, Any]:
        out: dict[str, Any] = dict(self.extra)
        out.update(
            id=self.id,
            title=self.title,
            description=self.description,
            status=self.status,
        )
        return out


@dataclass(slots=True, frozen=True)
class DropMessage:
    """
    A released drag, in explicit form.

    snapshot_status is the task's status when the drag started, which may be
    stale by the time the drop arrives.
    """

    task_id: TaskId
    snapshot_status: str
    target_status: str


def snapshot_task(task: Task) -> str:
    """Serialize a task at drag-start into the text carried by the drag payload."""
    return json.dumps(task.to_api(), ensure_ascii=False)


def parse_snapshot(raw: Any) -> Task | None:
    """
    Parse a drag payload back into a Task.

    Accepts JSON text/bytes or an already decoded mapping.
    Returns None for empty or malformed payloads (never raises).
    """
    if raw is None:
        return None

    data: Any = raw
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Drag payload is not valid UTF-8; ignoring.")
            return None
    if isinstance(raw, str):
        if not raw.strip():
            return None
        try:
            data = json.loads(raw)
        except ValueError:
            logger.debug("Drag payload is not JSON; ignoring: %r", raw[:80])
            return None

    if not isinstance(data, Mapping) or "status" not in data:
        return None
    try:
        return Task.from_api(data)
    except (TypeError, ValueError):
        return None
