from __future__ import annotations


class TasklistError(Exception):
    pass


class TaskNotFound(TasklistError, LookupError):
    def __init__(self, task_id: object) -> None:
        super().__init__(f"Task {task_id!r} not found")
        self.task_id = task_id
