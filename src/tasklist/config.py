from __future__ import annotations

import json
from typing import Any, Callable, Mapping

from quart import Config

ENV_PREFIX = "TASKLIST"


class DefaultConfig:
    HOST = "127.0.0.1"
    PORT = 5000
    CONSOLE_PORT = 5173
    ENVIRONMENT = "development"
    SERVICE_NAME = "Tasklist API"
    SEED_TASKS = True
    LOG_LEVEL = "INFO"
    API_URL = "http://localhost:5000"


def load_config(
    config: Config,
    overrides: Mapping[str, Any] | None = None,
    *,
    prefix: str = ENV_PREFIX,
    loads: Callable[[str], Any] = json.loads,
) -> Config:
    """Populate *config* from the defaults, the environment and overrides.

    Later sources win. Environment variables must start with the prefix
    (default ``TASKLIST_``), which is dropped for the config key, so
    ``TASKLIST_PORT=8000`` sets ``PORT``. Values are passed through
    *loads* so numbers and booleans arrive with the right type; values
    that fail to load are kept as strings.
    """
    config.from_object(DefaultConfig)
    config.from_prefixed_env(prefix, loads=loads)
    if overrides:
        config.update(overrides)
    return config
