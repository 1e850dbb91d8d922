from __future__ import annotations

import re
import time
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Callable

from pydantic import ValidationError as PydanticValidationError
from quart import Blueprint, current_app, jsonify, ResponseReturnValue
from quart_schema import RequestSchemaValidationError, validate_request, validate_response
from werkzeug.exceptions import HTTPException, InternalServerError

from .__about__ import __version__
from .exceptions import TaskNotFound
from .models import Task, TaskCreate, TaskUpdate
from .store import TaskStore

blueprint = Blueprint("api", __name__)

NOT_FOUND_MESSAGE = "Task not found"
INTERNAL_ERROR_MESSAGE = "Something went wrong!"

_ID_PATTERN = re.compile(r"-?[0-9]+")


def _store() -> TaskStore:
    return current_app.extensions["task_store"]


def _parse_id(raw: str) -> int:
    # An id that does not parse cannot match any task.
    if _ID_PATTERN.fullmatch(raw) is None:
        raise TaskNotFound(raw)
    return int(raw)


def existing_task(func: Callable) -> Callable:
    """Resolve the ``task_id`` path segment before anything else runs.

    Unknown ids are answered with a 404 ahead of any request body
    validation wrapped inside this decorator.
    """

    @wraps(func)
    async def wrapper(task_id: str, **kwargs: Any) -> ResponseReturnValue:
        parsed_id = _parse_id(task_id)
        _store().get(parsed_id)
        return await func(task_id=parsed_id, **kwargs)

    return wrapper


@blueprint.get("/")
async def describe() -> ResponseReturnValue:
    return {
        "message": f"Welcome to {current_app.config['SERVICE_NAME']}",
        "version": __version__,
        "endpoints": {"health": "/health", "tasks": "/api/tasks"},
    }


@blueprint.get("/health")
async def health() -> ResponseReturnValue:
    now = datetime.now(timezone.utc)
    return {
        "status": "healthy",
        "timestamp": now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "uptime": time.monotonic() - current_app.extensions["started_at"],
    }


@blueprint.get("/api/tasks")
async def list_tasks() -> ResponseReturnValue:
    return jsonify([task.to_dict() for task in _store().list()])


@blueprint.get("/api/tasks/<task_id>")
@existing_task
@validate_response(Task)
async def get_task(task_id: int) -> Task:
    return _store().get(task_id)


@blueprint.post("/api/tasks")
@validate_request(TaskCreate)
@validate_response(Task, 201)
async def create_task(data: TaskCreate) -> tuple[Task, int]:
    task = _store().create(data.title)
    current_app.logger.info("Task %d created", task.id)
    return task, 201


@blueprint.put("/api/tasks/<task_id>")
@existing_task
@validate_request(TaskUpdate)
@validate_response(Task)
async def update_task(task_id: int, data: TaskUpdate) -> Task:
    return _store().update(task_id, title=data.title or None, completed=data.completed)


@blueprint.delete("/api/tasks/<task_id>")
@existing_task
async def delete_task(task_id: int) -> ResponseReturnValue:
    _store().delete(task_id)
    current_app.logger.info("Task %d deleted", task_id)
    return "", 204


def _describe_validation_error(error: Exception | None) -> str:
    if isinstance(error, PydanticValidationError):
        first = error.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        return f"{location}: {first['msg']}" if location else first["msg"]
    return "Invalid request body"


@blueprint.app_errorhandler(TaskNotFound)
async def handle_not_found(_: TaskNotFound) -> ResponseReturnValue:
    return {"error": NOT_FOUND_MESSAGE}, 404


@blueprint.app_errorhandler(RequestSchemaValidationError)
async def handle_validation_error(error: RequestSchemaValidationError) -> ResponseReturnValue:
    return {"error": _describe_validation_error(error.validation_error)}, 400


@blueprint.app_errorhandler(HTTPException)
async def handle_http_exception(error: HTTPException) -> ResponseReturnValue:
    return {"error": error.description}, error.code


@blueprint.app_errorhandler(InternalServerError)
async def handle_internal_error(_: InternalServerError) -> ResponseReturnValue:
    # The original exception has already been logged by the app.
    return {"error": INTERNAL_ERROR_MESSAGE}, 500
