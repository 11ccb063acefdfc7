# tests/conftest.py

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

import config
from application.notifications import Notifier
from application.use_cases import TaskUseCases
from application.view_state import TaskView
from infrastructure.task_store import InMemoryTaskStore
from main import create_app
from schemas.task import TaskInput


@pytest.fixture()
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture()
def notifier() -> Notifier:
    return Notifier()


@pytest.fixture()
def use_cases(store: InMemoryTaskStore, notifier: Notifier) -> TaskUseCases:
    return TaskUseCases(store, notifier)


@pytest.fixture()
def view() -> TaskView:
    return TaskView()


@pytest.fixture()
def make_input():
    """Builds a validated TaskInput from keyword fields."""

    def _make(**fields) -> TaskInput:
        return TaskInput(**fields)

    return _make


@pytest.fixture()
def app():
    return create_app(max_views=10)


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture()
def client_view(app, client: TestClient):
    """Returns the TaskView owned by the test client's cookie."""

    def _view() -> TaskView:
        return app.state.views.get(client.cookies.get(config.VIEW_COOKIE))

    return _view
