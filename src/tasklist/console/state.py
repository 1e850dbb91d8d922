from __future__ import annotations

import asyncio
from logging import getLogger
from typing import Any

from ..models import Task
from .client import ApiError, TaskClient

log = getLogger(__name__)


class TaskConsole:
    """Local state of the task console.

    The state mirrors the last response the store sent back. Nothing is
    changed locally before the store has confirmed it, so a failed action
    leaves the state exactly as it was, apart from the error message.
    """

    def __init__(self, client: TaskClient) -> None:
        self.client = client
        self.tasks: list[Task] = []
        self.new_task = ""
        self.loading = True
        self.error: str | None = None
        self.api_info: dict[str, Any] | None = None
        self.mounted = False

    async def mount(self) -> None:
        """Fetch the API description and the task list, independently."""
        self.mounted = True
        await asyncio.gather(self._load_api_info(), self._load_tasks())

    async def _load_api_info(self) -> None:
        try:
            self.api_info = await self.client.describe()
        except ApiError as error:
            log.warning("Failed to fetch API info: %s", error.message)

    async def _load_tasks(self) -> None:
        self.loading = True
        try:
            self.tasks = await self.client.list_tasks()
            self.error = None
        except ApiError as error:
            self.error = error.message
        finally:
            self.loading = False

    def find(self, task_id: int) -> Task | None:
        return next((task for task in self.tasks if task.id == task_id), None)

    async def add(self, text: str) -> bool:
        self.new_task = text
        if not text.strip():
            return False

        try:
            task = await self.client.create_task(text)
        except ApiError as error:
            self.error = error.message
            return False

        self.tasks = [*self.tasks, task]
        self.new_task = ""
        return True

    async def toggle(self, task_id: int) -> bool:
        task = self.find(task_id)
        if task is None:
            return False

        try:
            updated = await self.client.update_task(task_id, completed=not task.completed)
        except ApiError as error:
            self.error = error.message
            return False

        self.tasks = [updated if item.id == task_id else item for item in self.tasks]
        return True

    async def delete(self, task_id: int) -> bool:
        try:
            await self.client.delete_task(task_id)
        except ApiError as error:
            self.error = error.message
            return False

        self.tasks = [item for item in self.tasks if item.id != task_id]
        return True

    def dismiss_error(self) -> None:
        self.error = None
