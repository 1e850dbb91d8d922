from __future__ import annotations

import asyncio
import os
import signal
from typing import Any

import click
from dotenv import find_dotenv, load_dotenv
from hypercorn.asyncio import serve
from hypercorn.config import Config as HypercornConfig
from quart import Quart

from .__about__ import __version__
from .app import create_app
from .console import create_console_app
from .logging import create_serving_logger


def get_load_dotenv(default: bool = True) -> bool:
    """Whether ``.env`` files should be loaded, ``TASKLIST_SKIP_DOTENV``
    disables it.
    """
    value = os.environ.get("TASKLIST_SKIP_DOTENV")

    if not value:
        return default

    return value.lower() in ("0", "false", "no")


def _overrides(**values: Any) -> dict[str, Any]:
    return {key.upper(): value for key, value in values.items() if value is not None}


async def _serve(app: Quart, host: str, port: int) -> None:
    config = HypercornConfig()
    config.bind = [f"{host}:{port}"]

    shutdown_event = asyncio.Event()

    def _signal_handler(*_: Any) -> None:
        shutdown_event.set()

    loop = asyncio.get_running_loop()
    for signal_name in {"SIGINT", "SIGTERM", "SIGBREAK"}:
        if hasattr(signal, signal_name):
            try:
                loop.add_signal_handler(getattr(signal, signal_name), _signal_handler)
            except NotImplementedError:
                # Add signal handler may not be implemented on Windows
                signal.signal(getattr(signal, signal_name), _signal_handler)

    await serve(app, config, shutdown_trigger=shutdown_event.wait)  # type: ignore[arg-type]


def run_app(app: Quart, host: str, port: int, banner: str) -> None:
    logger = create_serving_logger()
    logger.info("Server running on port %d", port)
    logger.info("Environment: %s", app.config["ENVIRONMENT"])
    logger.info("%s available at http://%s:%d", banner, host, port)
    asyncio.run(_serve(app, host, port))


@click.group()
@click.version_option(__version__, prog_name="Tasklist")
def cli() -> None:
    """Run the task store service or the task console."""
    if get_load_dotenv():
        load_dotenv(find_dotenv(usecwd=True))


@cli.command("serve")
@click.option("--host", "-h", default=None, help="The interface to bind to.")
@click.option("--port", "-p", type=int, default=None, help="The port to bind to.")
@click.option("--no-seed", is_flag=True, help="Start with an empty task list.")
def serve_command(host: str | None, port: int | None, no_seed: bool) -> None:
    """Run the task store service."""
    overrides = _overrides(host=host, port=port)
    if no_seed:
        overrides["SEED_TASKS"] = False
    app = create_app(overrides)
    run_app(app, app.config["HOST"], app.config["PORT"], "API")


@cli.command("console")
@click.option("--host", "-h", default=None, help="The interface to bind to.")
@click.option("--port", "-p", type=int, default=None, help="The port to bind to.")
@click.option("--api-url", default=None, help="Base URL of the task store service.")
def console_command(host: str | None, port: int | None, api_url: str | None) -> None:
    """Run the task console against a running store service."""
    app = create_console_app(_overrides(host=host, console_port=port, api_url=api_url))
    run_app(app, app.config["HOST"], app.config["CONSOLE_PORT"], "Console")


def main() -> None:
    cli()
