# src/task_board/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.grouping import BoardView
from ..tasks.task_store import TaskStore
from .ports import TaskService


@dataclass
class BoardState:
    """Everything a connector needs to drive the board."""

    # Settings object (see config.Settings); typed loosely so tests can pass a SimpleNamespace.
    settings: object

    service: TaskService
    store: TaskStore
    view: BoardView
