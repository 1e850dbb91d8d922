from __future__ import annotations

import threading
from dataclasses import replace
from logging import getLogger
from typing import Iterable

from .exceptions import TaskNotFound
from .models import Task

log = getLogger(__name__)

SEED_TASKS = (
    Task(1, "Deploy to Production", False),
    Task(2, "Setup CI/CD Pipeline", True),
    Task(3, "Configure Domain", False),
)


class TaskStore:
    """An ordered, in-memory collection of tasks.

    Tasks keep their insertion order. New ids are taken from a counter that
    only ever increases, so an id is never handed out twice for the lifetime
    of the store, however many tasks are deleted in between.

    All access goes through a single lock, which makes each operation
    atomic with respect to the others regardless of whether the caller is
    a coroutine on the event loop or a synchronous handler running in a
    worker thread.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._lock = threading.Lock()
        self._tasks: list[Task] = [replace(task) for task in tasks]
        ids = [task.id for task in self._tasks]
        if len(set(ids)) != len(ids):
            raise ValueError("Task ids must be unique")
        self._next_id = max(ids, default=0) + 1

    @classmethod
    def seeded(cls) -> TaskStore:
        return cls(SEED_TASKS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _index(self, task_id: int) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise TaskNotFound(task_id)

    def list(self) -> list[Task]:
        with self._lock:
            return [replace(task) for task in self._tasks]

    def get(self, task_id: int) -> Task:
        with self._lock:
            return replace(self._tasks[self._index(task_id)])

    def create(self, title: str) -> Task:
        with self._lock:
            task = Task(id=self._next_id, title=title, completed=False)
            self._next_id += 1
            self._tasks.append(task)
            log.debug("Created task %d", task.id)
            return replace(task)

    def update(
        self, task_id: int, *, title: str | None = None, completed: bool | None = None
    ) -> Task:
        with self._lock:
            task = self._tasks[self._index(task_id)]
            if title:
                task.title = title
            if completed is not None:
                task.completed = completed
            log.debug("Updated task %d", task.id)
            return replace(task)

    def delete(self, task_id: int) -> None:
        with self._lock:
            del self._tasks[self._index(task_id)]
            log.debug("Deleted task %d", task_id)
