from __future__ import annotations

from typing import Any, Mapping

import httpx
from quart import Quart

from ..config import load_config
from ..logging import create_logger
from .client import ApiError as ApiError, TaskClient as TaskClient
from .state import TaskConsole as TaskConsole
from .views import blueprint


def create_console_app(
    config: Mapping[str, Any] | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Quart:
    """Create the task console, a client of the store at ``API_URL``.

    A console process serves a single operator, so it holds one
    :class:`TaskConsole`. Pass *transport* to route the HTTP client
    somewhere other than the network, e.g. straight into a store app.
    """
    app = Quart("tasklist.console")
    load_config(app.config, config)
    create_logger(app)

    client = TaskClient(app.config["API_URL"], transport=transport)
    app.extensions["task_console"] = TaskConsole(client)
    app.register_blueprint(blueprint)

    @app.after_serving
    async def _close_client() -> None:
        await client.aclose()

    return app
