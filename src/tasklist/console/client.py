from __future__ import annotations

from typing import Any, Callable, TypeVar

import httpx

from ..exceptions import TasklistError
from ..models import Task

T = TypeVar("T")


class ApiError(TasklistError):
    """A request to the task store did not succeed.

    ``status_code`` is ``None`` when no response was received at all.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _api_info(body: Any) -> dict[str, Any]:
    if not isinstance(body, dict):
        raise TypeError("API description must be an object")
    return body


def _task_list(body: Any) -> list[Task]:
    if not isinstance(body, list):
        raise TypeError("Task list must be an array")
    return [Task.from_dict(item) for item in body]


class TaskClient:
    """Talks to the task store service over HTTP.

    Requests are never retried and carry no timeout, a failed action is
    reported once and left for the user to repeat. A successful status
    with a body that is not what the store sends counts as a failure too.
    """

    def __init__(
        self, base_url: str, *, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=None, transport=transport)

    async def _request(self, failure: str, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as error:
            raise ApiError(failure) from error

        if response.is_success:
            return response

        raise ApiError(_error_message(response, failure), response.status_code)

    async def _fetch(
        self, failure: str, parse: Callable[[Any], T], method: str, url: str, **kwargs: Any
    ) -> T:
        response = await self._request(failure, method, url, **kwargs)
        try:
            return parse(response.json())
        except (ValueError, KeyError, TypeError) as error:
            raise ApiError(failure, response.status_code) from error

    async def describe(self) -> dict[str, Any]:
        return await self._fetch("Failed to fetch API info", _api_info, "GET", "/")

    async def list_tasks(self) -> list[Task]:
        return await self._fetch("Failed to fetch tasks", _task_list, "GET", "/api/tasks")

    async def create_task(self, title: str) -> Task:
        return await self._fetch(
            "Failed to add task", Task.from_dict, "POST", "/api/tasks", json={"title": title}
        )

    async def update_task(self, task_id: int, **fields: Any) -> Task:
        return await self._fetch(
            "Failed to update task", Task.from_dict, "PUT", f"/api/tasks/{task_id}", json=fields
        )

    async def delete_task(self, task_id: int) -> None:
        await self._request("Failed to delete task", "DELETE", f"/api/tasks/{task_id}")

    async def aclose(self) -> None:
        await self._client.aclose()


def _error_message(response: httpx.Response, default: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return default
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return default
