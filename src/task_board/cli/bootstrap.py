# src/task_board/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the HTTP client, the store and the grouped view into BoardState,
- closes what it opened on shutdown.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskService
from ..core.state import BoardState
from ..tasks.grouping import BoardView
from ..tasks.task_api import TaskApiClient
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_board_state(*, settings=None, service: TaskService | None = None) -> BoardState:
    """
    Create BoardState from the provided settings.

    Keeping settings and the service injectable makes the app easy to test.
    If settings is None, falls back to get_settings(); if service is None, an
    HTTP client for settings.api_url is created.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if service is None:
        service = TaskApiClient(settings.api_url, timeout=settings.http_timeout_seconds)
        logger.info("Task service: %s", settings.api_url)

    store = TaskStore(service)
    return BoardState(settings=settings, service=service, store=store, view=BoardView(store))


async def close_board_state(state: BoardState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    aclose = getattr(state.service, "aclose", None)
    if aclose is None:
        return
    try:
        await aclose()
    except Exception:
        logger.debug("Task service close failed.", exc_info=True)
