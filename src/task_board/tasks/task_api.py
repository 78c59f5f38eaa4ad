# src/task_board/tasks/task_api.py

"""
HTTP client for the remote task service.

Endpoints (relative to the configured base URL):
- GET    /api/tasks              -> [Task]
- POST   /api/tasks              -> Task      body {title, description}
- PUT    /api/tasks/{id}         -> Task      body {field: value, ...}
- PATCH  /api/tasks/{id}/status  -> Task      body {status}
- DELETE /api/tasks/{id}         -> (no body)

Every failure (non-2xx, transport error, unexpected body) is raised as
RemoteFailure with a per-operation message; the raw cause is only logged.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from ..core.errors import RemoteFailure
from .task_models import Task, TaskId

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch tasks"
CREATE_FAILED = "Failed to create task"
UPDATE_FAILED = "Failed to update task"
STATUS_FAILED = "Failed to update status"
DELETE_FAILED = "Failed to delete task"


class TaskApiClient:
    """
    Async client over httpx.

    If no httpx.AsyncClient is injected, one is created and owned (closed by aclose()).
    No retries: a failed call is reported once and the caller decides what to show.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> TaskApiClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ---- low-level helpers ----

    def _url(self, *parts: Any) -> str:
        # Ids come from payloads; each one must stay a single path segment.
        path = "/".join(("api", "tasks", *(quote(str(p), safe="") for p in parts)))
        return f"{self._base_url}/{path}"

    async def _request(
        self,
        operation: str,
        message: str,
        method: str,
        url: str,
        *,
        json: Any = None,
    ) -> httpx.Response:
        try:
            resp = await self._client.request(method, url, json=json)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("%s %s failed (%s): %s", method, url, operation, e)
            raise RemoteFailure(message, operation=operation) from e

        if not resp.is_success:
            logger.warning("%s %s -> HTTP %s (%s)", method, url, resp.status_code, operation)
            raise RemoteFailure(message, operation=operation, status_code=resp.status_code)

        logger.debug("%s %s -> HTTP %s", method, url, resp.status_code)
        return resp

    @staticmethod
    def _json(resp: httpx.Response, operation: str, message: str) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            logger.warning("Response for %s is not JSON: %r", operation, resp.text[:200])
            raise RemoteFailure(message, operation=operation, status_code=resp.status_code) from e

    def _task(self, resp: httpx.Response, operation: str, message: str) -> Task:
        data = self._json(resp, operation, message)
        try:
            return Task.from_api(data)
        except (TypeError, ValueError) as e:
            logger.warning("Malformed task in %s response: %s", operation, e)
            raise RemoteFailure(message, operation=operation, status_code=resp.status_code) from e

    # ---- public API ----

    async def fetch_tasks(self) -> list[Task]:
        resp = await self._request("fetch", FETCH_FAILED, "GET", self._url())
        data = self._json(resp, "fetch", FETCH_FAILED)
        if not isinstance(data, list):
            logger.warning("Task list response is not an array: %s", type(data).__name__)
            raise RemoteFailure(FETCH_FAILED, operation="fetch", status_code=resp.status_code)
        try:
            return [Task.from_api(item) for item in data]
        except (TypeError, ValueError) as e:
            logger.warning("Malformed task in list response: %s", e)
            raise RemoteFailure(FETCH_FAILED, operation="fetch", status_code=resp.status_code) from e

    async def create_task(self, title: str, description: str) -> Task:
        body = {"title": title, "description": description}
        resp = await self._request("create", CREATE_FAILED, "POST", self._url(), json=body)
        return self._task(resp, "create", CREATE_FAILED)

    async def update_task(self, task_id: TaskId, updates: dict[str, Any]) -> Task:
        resp = await self._request("update", UPDATE_FAILED, "PUT", self._url(task_id), json=updates)
        return self._task(resp, "update", UPDATE_FAILED)

    async def update_task_status(self, task_id: TaskId, status: str) -> Task:
        resp = await self._request(
            "status", STATUS_FAILED, "PATCH", self._url(task_id, "status"), json={"status": status}
        )
        return self._task(resp, "status", STATUS_FAILED)

    async def delete_task(self, task_id: TaskId) -> None:
        await self._request("delete", DELETE_FAILED, "DELETE", self._url(task_id))
