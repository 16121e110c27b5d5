# tests/conftest.py

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api_teste.db.store import TaskStore
from api_teste.main import create_app


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def client() -> TestClient:
    """Client bound to a fresh app, so every test starts with an empty store."""
    return TestClient(create_app())


@pytest.fixture()
def make_task(client: TestClient):
    def _make(titulo: str = "Tarefa", **extra) -> dict:
        resp = client.post("/api/tarefas", json={"titulo": titulo, **extra})
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make
