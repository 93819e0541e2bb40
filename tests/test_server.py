"""Tests for the HTTP endpoints."""
from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from taskday.server import create_app


@pytest.fixture
def client(tmp_path: Path):
    web_dir = tmp_path / "web"
    web_dir.mkdir()
    (web_dir / "index.html").write_text("<html>taskday</html>")
    app = create_app(
        db_path=tmp_path / "scheduler.db",
        web_dir=web_dir,
        clock=lambda: date(2024, 3, 1),
    )
    with TestClient(app) as test_client:
        yield test_client


# ===========================================================================
# /api/nextdate
# ===========================================================================

class TestNextDateEndpoint:
    def test_returns_next_date(self, client: TestClient):
        resp = client.get("/api/nextdate", params={"now": "20240301", "date": "20230301", "repeat": "y"})
        assert resp.status_code == 200
        assert resp.json() == {"next_date": "20250301"}

    def test_invalid_now(self, client: TestClient):
        resp = client.get("/api/nextdate", params={"now": "x", "date": "20230301", "repeat": "y"})
        assert resp.status_code == 400
        assert "error" in resp.json()

    def test_invalid_rule(self, client: TestClient):
        resp = client.get("/api/nextdate", params={"now": "20240301", "date": "20240101", "repeat": "d 500"})
        assert resp.status_code == 400

    def test_missing_rule(self, client: TestClient):
        resp = client.get("/api/nextdate", params={"now": "20240301", "date": "20240101"})
        assert resp.status_code == 400


# ===========================================================================
# /api/task/add, /api/tasks, /api/task
# ===========================================================================

class TestTaskEndpoints:
    def test_add_and_get(self, client: TestClient):
        resp = client.post("/api/task/add", json={
            "date": "20240101", "title": "Run", "comment": "5k", "repeat": "d 7",
        })
        assert resp.status_code == 200
        task_id = resp.json()["id"]
        assert isinstance(task_id, str)

        resp = client.get("/api/task", params={"id": task_id})
        assert resp.status_code == 200
        assert resp.json() == {
            "id": task_id, "date": "20240304", "title": "Run", "comment": "5k", "repeat": "d 7",
        }

    def test_add_requires_title(self, client: TestClient):
        resp = client.post("/api/task/add", json={"date": "20240305"})
        assert resp.status_code == 400

    def test_add_invalid_date(self, client: TestClient):
        resp = client.post("/api/task/add", json={"date": "2024-03-05", "title": "Bad"})
        assert resp.status_code == 400

    def test_list_empty(self, client: TestClient):
        resp = client.get("/api/tasks")
        assert resp.status_code == 200
        assert resp.json() == {"tasks": []}

    def test_list_ordered(self, client: TestClient):
        client.post("/api/task/add", json={"date": "20240320", "title": "B"})
        client.post("/api/task/add", json={"date": "20240302", "title": "A"})
        tasks = client.get("/api/tasks").json()["tasks"]
        assert [t["title"] for t in tasks] == ["A", "B"]

    def test_get_requires_id(self, client: TestClient):
        assert client.get("/api/task").status_code == 400

    def test_get_non_numeric_id(self, client: TestClient):
        assert client.get("/api/task", params={"id": "abc"}).status_code == 400

    @pytest.mark.parametrize("task_id", ["5_0", " 7", "+7", "-1", "7.0"])
    def test_get_rejects_loose_integer_forms(self, client: TestClient, task_id: str):
        for i in range(50):
            client.post("/api/task/add", json={"title": f"Task {i}"})
        resp = client.get("/api/task", params={"id": task_id})
        assert resp.status_code == 400

    def test_get_missing(self, client: TestClient):
        assert client.get("/api/task", params={"id": "123"}).status_code == 404

    def test_update(self, client: TestClient):
        task_id = client.post("/api/task/add", json={"date": "20240305", "title": "Old"}).json()["id"]
        resp = client.put("/api/task", json={
            "id": task_id, "date": "20231231", "title": "New", "comment": "", "repeat": "",
        })
        assert resp.status_code == 200
        assert resp.json() == {}
        task = client.get("/api/task", params={"id": task_id}).json()
        assert task["title"] == "New"
        assert task["date"] == "20240301"

    def test_update_missing(self, client: TestClient):
        resp = client.put("/api/task", json={"id": "77", "date": "20240305", "title": "Nope"})
        assert resp.status_code == 404

    def test_update_without_id(self, client: TestClient):
        resp = client.put("/api/task", json={"date": "20240305", "title": "No id"})
        assert resp.status_code == 400

    def test_update_malformed_id(self, client: TestClient):
        resp = client.put("/api/task", json={"id": "abc", "title": "Bad id"})
        assert resp.status_code == 400

    @pytest.mark.parametrize("task_id", [True, 1.0, "5_0", "+1", " 1"])
    def test_update_rejects_non_integer_id(self, client: TestClient, task_id):
        first_id = client.post("/api/task/add", json={"date": "20240305", "title": "Keep"}).json()["id"]
        resp = client.put("/api/task", json={"id": task_id, "title": "x"})
        assert resp.status_code == 400
        assert client.get("/api/task", params={"id": first_id}).json()["title"] == "Keep"

    def test_update_accepts_digit_string_id(self, client: TestClient):
        task_id = client.post("/api/task/add", json={"date": "20240305", "title": "Old"}).json()["id"]
        resp = client.put("/api/task", json={"id": task_id, "date": "20240305", "title": "New"})
        assert resp.status_code == 200


class TestStaticFiles:
    def test_serves_index(self, client: TestClient):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "taskday" in resp.text
