from __future__ import annotations

from pathlib import Path

from _pytest.monkeypatch import MonkeyPatch
from quart import Config

from tasklist.config import DefaultConfig, load_config


def test_defaults() -> None:
    config = load_config(Config(Path(__file__).parent))
    assert config["PORT"] == DefaultConfig.PORT
    assert config["SEED_TASKS"] is True
    assert config["API_URL"] == "http://localhost:5000"


def test_from_prefixed_env(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("TASKLIST_PORT", "8000")
    monkeypatch.setenv("TASKLIST_SEED_TASKS", "false")
    monkeypatch.setenv("TASKLIST_ENVIRONMENT", "production")
    monkeypatch.setenv("PORT", "1")

    config = load_config(Config(Path(__file__).parent))

    assert config["PORT"] == 8000
    assert config["SEED_TASKS"] is False
    assert config["ENVIRONMENT"] == "production"


def test_overrides_win(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("TASKLIST_PORT", "8000")
    config = load_config(Config(Path(__file__).parent), {"PORT": 7000})
    assert config["PORT"] == 7000
