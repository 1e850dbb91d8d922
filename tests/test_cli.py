from __future__ import annotations

from unittest.mock import Mock

import pytest
from _pytest.monkeypatch import MonkeyPatch
from click.testing import CliRunner

import tasklist.cli
from tasklist.cli import cli, get_load_dotenv


@pytest.fixture(name="run_app")
def _run_app(monkeypatch: MonkeyPatch) -> Mock:
    run_app = Mock()
    monkeypatch.setattr(tasklist.cli, "run_app", run_app)
    monkeypatch.setenv("TASKLIST_SKIP_DOTENV", "1")
    return run_app


def test_version_command() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert "Tasklist" in result.output


def test_serve_command(run_app: Mock) -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["serve", "--port", "8000", "--no-seed"])
    assert result.exit_code == 0
    app, host, port, banner = run_app.call_args.args
    assert (host, port, banner) == ("127.0.0.1", 8000, "API")
    assert len(app.extensions["task_store"]) == 0


def test_serve_command_env(run_app: Mock, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("TASKLIST_PORT", "9000")
    monkeypatch.setenv("TASKLIST_HOST", "0.0.0.0")
    runner = CliRunner()
    runner.invoke(cli, ["serve"])
    app, host, port, _ = run_app.call_args.args
    assert (host, port) == ("0.0.0.0", 9000)
    assert len(app.extensions["task_store"]) == 3


def test_console_command(run_app: Mock) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli, ["console", "--port", "8080", "--api-url", "http://store.example:5000"]
    )
    assert result.exit_code == 0
    app, _, port, banner = run_app.call_args.args
    assert (port, banner) == (8080, "Console")
    assert app.config["API_URL"] == "http://store.example:5000"


@pytest.mark.parametrize(
    "value, expected", [(None, True), ("", True), ("1", False), ("false", True), ("no", True)]
)
def test_get_load_dotenv(monkeypatch: MonkeyPatch, value: str | None, expected: bool) -> None:
    if value is None:
        monkeypatch.delenv("TASKLIST_SKIP_DOTENV", raising=False)
    else:
        monkeypatch.setenv("TASKLIST_SKIP_DOTENV", value)
    assert get_load_dotenv() is expected
