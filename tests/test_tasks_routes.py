import pytest


@pytest.fixture
def sample_task():
    return {"title": "Walk the dog", "description": "Around the park"}


def test_list_tasks_has_example(client):
    resp = client.get("/tasks")
    assert resp.status_code == 200
    assert resp.json() == [
        {"id": "12345", "title": "Buy groceries", "description": "Milk, Bread, Butter", "completed": False}
    ]


def test_create_task(client, sample_task):
    resp = client.post("/tasks", json=sample_task)
    assert resp.status_code == 201
    task = resp.json()
    assert task["title"] == "Walk the dog"
    assert task["completed"] is False
    assert client.get(f"/tasks/{task['id']}").json() == task


def test_create_task_without_title_is_422(client):
    resp = client.post("/tasks", json={"description": "no title"})
    assert resp.status_code == 422


def test_get_task_not_found(client):
    assert client.get("/tasks/nope").status_code == 404


def test_update_task_keeps_completed_when_omitted(client):
    client.put("/tasks/12345", json={"title": "Buy groceries", "completed": True})
    resp = client.put("/tasks/12345", json={"title": "Buy more groceries"})
    assert resp.status_code == 200
    task = resp.json()
    assert task["title"] == "Buy more groceries"
    assert task["completed"] is True
    assert "description" not in task


def test_update_task_not_found(client, sample_task):
    assert client.put("/tasks/nope", json=sample_task).status_code == 404


def test_delete_task(client):
    resp = client.delete("/tasks/12345")
    assert resp.status_code == 204
    assert resp.content == b""
    assert client.delete("/tasks/12345").status_code == 404
