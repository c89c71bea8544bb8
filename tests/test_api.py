from __future__ import annotations

from fastapi.testclient import TestClient

from todo_board.store import TaskStore


def test_list_tasks(client: TestClient) -> None:
    response = client.get("/api/tasks")

    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "text": "Learn Docker", "completed": False},
        {"id": 2, "text": "Build a TO-DO app", "completed": True},
        {"id": 3, "text": "Deploy the app", "completed": False},
    ]


def test_get_task(client: TestClient) -> None:
    assert client.get("/api/tasks/2").json()["text"] == "Build a TO-DO app"
    assert client.get("/api/tasks/42").status_code == 404


def test_create_task(client: TestClient, store: TaskStore) -> None:
    response = client.post("/api/tasks", json={"text": "Write docs"})

    assert response.status_code == 201
    assert response.json() == {"id": 4, "text": "Write docs", "completed": False}
    assert store.get(4).text == "Write docs"


def test_create_task_rejects_empty_text(client: TestClient, store: TaskStore) -> None:
    response = client.post("/api/tasks", json={"text": ""})

    assert response.status_code == 400
    assert response.json() == {"error": "Task text is required"}
    assert len(store) == 3


def test_create_task_rejects_missing_text(client: TestClient) -> None:
    assert client.post("/api/tasks", json={}).status_code == 400


def test_create_task_rejects_malformed_body(client: TestClient) -> None:
    response = client.post(
        "/api/tasks",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert "error" in response.json()


def test_update_task_toggles_completed(client: TestClient) -> None:
    response = client.put("/api/tasks/1", json={"completed": True})

    assert response.status_code == 200
    assert response.json() == {"id": 1, "text": "Learn Docker", "completed": True}


def test_update_task_changes_text(client: TestClient) -> None:
    response = client.put("/api/tasks/3", json={"text": "Deploy to prod"})

    assert response.json() == {"id": 3, "text": "Deploy to prod", "completed": False}


def test_update_unknown_task_is_404(client: TestClient) -> None:
    response = client.put("/api/tasks/999", json={"completed": True})

    assert response.status_code == 404
    assert response.json() == {"error": "Task not found"}


def test_non_numeric_id_is_404(client: TestClient) -> None:
    assert client.put("/api/tasks/abc", json={"completed": True}).status_code == 404
    assert client.delete("/api/tasks/abc").status_code == 404


def test_update_with_empty_text_is_400(client: TestClient) -> None:
    assert client.put("/api/tasks/1", json={"text": ""}).status_code == 400


def test_delete_task(client: TestClient, store: TaskStore) -> None:
    response = client.delete("/api/tasks/2")

    assert response.status_code == 204
    assert response.content == b""
    assert [t.id for t in store.list()] == [1, 3]


def test_delete_unknown_task_is_404(client: TestClient) -> None:
    assert client.delete("/api/tasks/999").status_code == 404


def test_cors_allows_any_origin(client: TestClient) -> None:
    response = client.options(
        "/api/tasks",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_health(client: TestClient) -> None:
    assert client.get("/api/health").json() == {"status": "ok", "count": 3}


def test_each_app_owns_its_store(client: TestClient) -> None:
    from todo_board.config import Settings
    from todo_board.main import create_app

    client.post("/api/tasks", json={"text": "only here"})

    with TestClient(create_app(Settings(), store=TaskStore())) as other:
        assert len(other.get("/api/tasks").json()) == 3
