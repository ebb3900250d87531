"""Tests for the /api/tasks endpoints."""

from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlmodel import Session

from taskboard.events.consumers import NotificationFeed
from taskboard.services.tasks import TaskStoreError


def create(client: TestClient, title: str) -> dict:
    response = client.post("/api/tasks", json={"title": title})
    assert response.status_code == 201
    return response.json()


class TestCreateEndpoint:
    """POST /api/tasks"""

    def test_create_returns_task(self, client: TestClient):
        response = client.post("/api/tasks", json={"title": "Buy milk"})

        assert response.status_code == 201
        body = response.json()
        assert set(body) == {"id", "title", "completed", "createdAt", "completedAt"}
        assert isinstance(body["id"], int)
        assert body["title"] == "Buy milk"
        assert body["completed"] is False
        assert body["completedAt"] is None
        assert body["createdAt"].endswith("Z")

    def test_empty_title_rejected(self, client: TestClient):
        response = client.post("/api/tasks", json={"title": ""})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid task data"
        assert body["errors"][0]["field"] == "title"

    def test_oversized_title_rejected(self, client: TestClient):
        response = client.post("/api/tasks", json={"title": "a" * 101})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "title"

    def test_max_length_title_accepted(self, client: TestClient):
        response = client.post("/api/tasks", json={"title": "a" * 100})

        assert response.status_code == 201

    def test_whitespace_title_accepted(self, client: TestClient):
        response = client.post("/api/tasks", json={"title": " "})

        assert response.status_code == 201
        assert response.json()["title"] == " "

    def test_missing_title_rejected(self, client: TestClient):
        response = client.post("/api/tasks", json={})

        assert response.status_code == 400
        assert "errors" in response.json()

    def test_create_adds_notification(self, client: TestClient, app):
        create(client, "Buy milk")

        feed = next(
            c for c in app.state.event_bus.consumers if isinstance(c, NotificationFeed)
        )
        [notification] = feed.notifications()
        assert notification.description == "Task added successfully!"


class TestListEndpoint:
    """GET /api/tasks"""

    def test_empty(self, client: TestClient):
        response = client.get("/api/tasks")

        assert response.status_code == 200
        assert response.json() == []

    def test_pending_before_completed(self, client: TestClient):
        a = create(client, "A")
        b = create(client, "B")
        c = create(client, "C")
        client.patch(f"/api/tasks/{b['id']}", json={"completed": True})

        ids = [t["id"] for t in client.get("/api/tasks").json()]

        assert ids == [c["id"], a["id"], b["id"]]

    def test_store_failure_returns_generic_500(self, client: TestClient):
        with patch(
            "taskboard.api.tasks.list_tasks",
            side_effect=TaskStoreError("Failed to fetch tasks"),
        ):
            response = client.get("/api/tasks")

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to fetch tasks"}


class TestPatchEndpoint:
    """PATCH /api/tasks/{id}"""

    def test_complete_and_reopen(self, client: TestClient):
        task = create(client, "Buy milk")

        done = client.patch(f"/api/tasks/{task['id']}", json={"completed": True})
        assert done.status_code == 200
        assert done.json()["completed"] is True
        assert done.json()["completedAt"] is not None

        reopened = client.patch(f"/api/tasks/{task['id']}", json={"completed": False})
        assert reopened.status_code == 200
        assert reopened.json()["completed"] is False
        assert reopened.json()["completedAt"] is None

    def test_not_found(self, client: TestClient):
        response = client.patch("/api/tasks/9999", json={"completed": True})

        assert response.status_code == 404
        assert response.json() == {"message": "Task not found"}

    def test_non_numeric_id(self, client: TestClient):
        response = client.patch("/api/tasks/abc", json={"completed": True})

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid task ID"}

    def test_non_boolean_completed_rejected(self, client: TestClient):
        task = create(client, "Buy milk")

        response = client.patch(f"/api/tasks/{task['id']}", json={"completed": "yes"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "completed"

    def test_store_failure_reports_update(self, client: TestClient):
        task = create(client, "Buy milk")
        error = OperationalError("SELECT", {}, Exception("connection lost"))

        with patch.object(Session, "get", side_effect=error):
            response = client.patch(f"/api/tasks/{task['id']}", json={"completed": True})

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to update task"}

    def test_missing_completed_rejected(self, client: TestClient):
        task = create(client, "Buy milk")

        response = client.patch(f"/api/tasks/{task['id']}", json={"title": "Other"})

        assert response.status_code == 400
        listed = client.get("/api/tasks").json()
        assert listed[0]["title"] == "Buy milk"


class TestDeleteEndpoint:
    """DELETE /api/tasks/{id}"""

    def test_delete_then_404(self, client: TestClient):
        task = create(client, "Buy milk")

        first = client.delete(f"/api/tasks/{task['id']}")
        assert first.status_code == 204
        assert first.content == b""
        assert client.get("/api/tasks").json() == []

        second = client.delete(f"/api/tasks/{task['id']}")
        assert second.status_code == 404
        assert second.json() == {"message": "Task not found"}

    def test_store_failure_reports_delete(self, client: TestClient):
        task = create(client, "Buy milk")
        error = OperationalError("SELECT", {}, Exception("connection lost"))

        with patch.object(Session, "get", side_effect=error):
            response = client.delete(f"/api/tasks/{task['id']}")

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to delete task"}
        assert len(client.get("/api/tasks").json()) == 1

    def test_non_numeric_id(self, client: TestClient):
        response = client.delete("/api/tasks/1.5")

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid task ID"}


def test_unknown_route_uses_message_body(client: TestClient):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_health(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_full_lifecycle(client: TestClient):
    """Create, complete, reopen and delete a task over HTTP."""
    other = create(client, "Walk dog")
    task = create(client, "Buy milk")

    listed = client.get("/api/tasks").json()
    assert [t["id"] for t in listed] == [task["id"], other["id"]]
    assert listed[0]["completedAt"] is None

    client.patch(f"/api/tasks/{task['id']}", json={"completed": True})
    listed = client.get("/api/tasks").json()
    assert [t["id"] for t in listed] == [other["id"], task["id"]]
    assert listed[1]["completedAt"] is not None

    client.patch(f"/api/tasks/{task['id']}", json={"completed": False})
    listed = client.get("/api/tasks").json()
    assert [t["id"] for t in listed] == [task["id"], other["id"]]
    assert listed[0]["completedAt"] is None

    assert client.delete(f"/api/tasks/{task['id']}").status_code == 204
    assert [t["id"] for t in client.get("/api/tasks").json()] == [other["id"]]
