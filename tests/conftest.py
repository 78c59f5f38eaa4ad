# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_board.cli.bootstrap import create_board_state
from task_board.core.state import BoardState
from task_board.tasks.task_store import TaskStore

from .fakes import FakeTaskService

SAMPLE_TASKS = [
    {"id": 1, "title": "A", "description": "", "status": "Todo"},
    {"id": 2, "title": "B", "description": "second", "status": "Done"},
]


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and commands.

    A SimpleNamespace keeps tests independent of the process environment.
    """
    return SimpleNamespace(
        app_name="task-board-test",
        log_level="DEBUG",
        api_url="http://tasks.test",
        http_timeout_seconds=1.0,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def service() -> FakeTaskService:
    return FakeTaskService([dict(t) for t in SAMPLE_TASKS])


@pytest.fixture()
def store(service: FakeTaskService) -> TaskStore:
    return TaskStore(service)


@pytest.fixture()
def state(settings: SimpleNamespace, service: FakeTaskService) -> BoardState:
    """BoardState wired with the in-memory service."""
    return create_board_state(settings=settings, service=service)
