# tests/test_tasks_api.py

from __future__ import annotations

from datetime import datetime


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_list_empty(client):
    resp = client.get("/api/tarefas")
    assert resp.status_code == 200
    assert resp.json() == {"total": 0, "tarefas": []}


def test_create_uses_defaults(client):
    resp = client.post("/api/tarefas", json={"titulo": "Buy milk"})
    assert resp.status_code == 201
    data = resp.json()

    assert data["id"] == 1
    assert data["titulo"] == "Buy milk"
    assert data["descricao"] == ""
    assert data["prioridade"] == "media"
    assert data["status"] == "pendente"
    assert data["criadaEm"] == data["atualizadaEm"]


def test_create_requires_title(client):
    for body in ({}, {"titulo": ""}):
        resp = client.post("/api/tarefas", json=body)
        assert resp.status_code == 400
        assert "error" in resp.json()


def test_create_rejects_unknown_priority(client):
    resp = client.post("/api/tarefas", json={"titulo": "x", "prioridade": "urgente"})
    assert resp.status_code == 400


def test_get_by_id(client, make_task):
    task = make_task("Read book", descricao="chapter 3", prioridade="alta")
    resp = client.get(f"/api/tarefas/{task['id']}")
    assert resp.status_code == 200
    assert resp.json() == task


def test_get_missing_returns_404(client, make_task):
    for i in range(10):
        make_task(f"t{i}")

    for task_id in ("999", "abc", "5abc", "1_0", "+10", "-1"):
        resp = client.get(f"/api/tarefas/{task_id}")
        assert resp.status_code == 404, task_id
        assert resp.json() == {"error": "Tarefa não encontrada"}


def test_malformed_id_never_touches_another_task(client, make_task):
    for i in range(10):
        make_task(f"t{i}")

    assert client.put("/api/tarefas/1_0", json={"titulo": "hijacked"}).status_code == 404
    assert client.delete("/api/tarefas/1_0").status_code == 404

    tenth = client.get("/api/tarefas/10").json()
    assert tenth["titulo"] == "t9"
    assert client.get("/api/tarefas").json()["total"] == 10


def test_update_partial(client, make_task):
    task = make_task("Write report", descricao="quarterly", prioridade="baixa")
    resp = client.put(f"/api/tarefas/{task['id']}", json={"status": "concluida"})
    assert resp.status_code == 200
    data = resp.json()

    assert data["status"] == "concluida"
    for key in ("id", "titulo", "descricao", "prioridade", "criadaEm"):
        assert data[key] == task[key]
    assert _ts(data["atualizadaEm"]) > _ts(task["atualizadaEm"])


def test_empty_update_still_advances_updated_at(client, make_task):
    task = make_task("Idle", descricao="nothing changes", prioridade="alta")
    first = client.put(f"/api/tarefas/{task['id']}", json={})
    assert first.status_code == 200
    second = client.put(f"/api/tarefas/{task['id']}", json={}).json()

    for key in ("id", "titulo", "descricao", "prioridade", "status", "criadaEm"):
        assert first.json()[key] == second[key] == task[key]
    assert _ts(task["atualizadaEm"]) < _ts(first.json()["atualizadaEm"]) < _ts(second["atualizadaEm"])


def test_update_cannot_overwrite_identity(client, make_task):
    task = make_task("Stable")
    resp = client.put(
        f"/api/tarefas/{task['id']}",
        json={"id": 42, "criadaEm": "2000-01-01T00:00:00Z", "titulo": "Renamed"},
    )
    data = resp.json()
    assert data["id"] == task["id"]
    assert data["criadaEm"] == task["criadaEm"]
    assert data["titulo"] == "Renamed"


def test_update_missing_returns_404(client):
    resp = client.put("/api/tarefas/7", json={"titulo": "x"})
    assert resp.status_code == 404
    assert "error" in resp.json()


def test_delete_then_get(client, make_task):
    task = make_task("Temporary")
    resp = client.delete(f"/api/tarefas/{task['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Tarefa removida com sucesso", "tarefa": task}

    assert client.get(f"/api/tarefas/{task['id']}").status_code == 404
    assert client.delete(f"/api/tarefas/{task['id']}").status_code == 404
    assert make_task("Next")["id"] == task["id"] + 1


def test_list_filters(client, make_task):
    a = make_task("a")
    make_task("b", status="concluida")
    c = make_task("c", prioridade="alta")

    resp = client.get("/api/tarefas", params={"status": "pendente"})
    data = resp.json()
    assert data["total"] == 2
    assert [t["id"] for t in data["tarefas"]] == [a["id"], c["id"]]

    resp = client.get("/api/tarefas", params={"status": "pendente", "prioridade": "alta"})
    assert [t["id"] for t in resp.json()["tarefas"]] == [c["id"]]


def test_list_rejects_unknown_filter_value(client):
    resp = client.get("/api/tarefas", params={"status": "arquivada"})
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_stats(client, make_task):
    make_task("a", status="concluida", prioridade="alta")
    make_task("b", status="em_andamento")
    make_task("c")

    resp = client.get("/api/tarefas/stats")
    assert resp.status_code == 200
    assert resp.json() == {
        "total": 3,
        "porStatus": {"pendente": 1, "em_andamento": 1, "concluida": 1},
        "porPrioridade": {"baixa": 0, "media": 2, "alta": 1},
    }


def test_apps_do_not_share_state(client, make_task):
    from fastapi.testclient import TestClient

    from api_teste.main import create_app

    make_task("only here")
    other = TestClient(create_app())
    assert other.get("/api/tarefas").json()["total"] == 0
