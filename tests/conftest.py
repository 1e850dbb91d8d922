from __future__ import annotations

import pytest
from quart import Quart
from quart.typing import TestClientProtocol

from tasklist import create_app


@pytest.fixture(name="app")
def _app() -> Quart:
    return create_app({"TESTING": True})


@pytest.fixture(name="client")
def _client(app: Quart) -> TestClientProtocol:
    return app.test_client()
