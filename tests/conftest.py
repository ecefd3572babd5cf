from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from client.cache import LocalStorage
from infrastructure.task_store import InMemoryTaskStore
from main import create_app


@pytest.fixture()
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture()
def app(store: InMemoryTaskStore):
    """A fresh application per test so tasks never leak between tests."""
    return create_app(store)


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture()
def storage(tmp_path: Path) -> LocalStorage:
    return LocalStorage(tmp_path / "cache.json")
