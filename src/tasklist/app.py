from __future__ import annotations

import time
from typing import Any, Mapping

from quart import Quart
from quart_schema import Info, QuartSchema

from .__about__ import __version__
from .api import blueprint as api_blueprint
from .config import load_config
from .logging import create_logger
from .store import TaskStore


def create_app(config: Mapping[str, Any] | None = None) -> Quart:
    """Create the task store service.

    The store is built here and lives exactly as long as the app, handlers
    reach it through ``app.extensions["task_store"]``.
    """
    app = Quart("tasklist")
    load_config(app.config, config)
    logger = create_logger(app)

    QuartSchema(app, info=Info(title=app.config["SERVICE_NAME"], version=__version__))

    store = TaskStore.seeded() if app.config["SEED_TASKS"] else TaskStore()
    app.extensions["task_store"] = store
    app.extensions["started_at"] = time.monotonic()

    app.register_blueprint(api_blueprint)

    @app.before_serving
    async def _announce() -> None:
        logger.info("Task store ready with %d tasks", len(store))

    return app
