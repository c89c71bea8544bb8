from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from todo_board.client.board import TaskBoard
from todo_board.config import Settings
from todo_board.main import create_app
from todo_board.store import TaskStore

from .fakes import FakeTaskApi


@pytest.fixture()
def settings() -> Settings:
    """Defaults only, independent of the caller's environment."""
    return Settings()


@pytest.fixture()
def store() -> TaskStore:
    """Fresh store holding the three seed tasks."""
    return TaskStore()


@pytest.fixture()
def app(settings: Settings, store: TaskStore) -> FastAPI:
    return create_app(settings, store=store)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def fake_api(store: TaskStore) -> FakeTaskApi:
    return FakeTaskApi(store=store)


@pytest.fixture()
def board(fake_api: FakeTaskApi) -> TaskBoard:
    """Board wired to the fake API, not loaded yet."""
    return TaskBoard(fake_api)
