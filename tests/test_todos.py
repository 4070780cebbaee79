import pytest

from habit_tracker.errors import TodoNotFound, ValidationError
from habit_tracker.services import todos as todo_service


def test_todo_lifecycle(client, auth_headers):
    created = client.post("/todos", json={"title": "Buy milk"}, headers=auth_headers)
    assert created.status_code == 201
    todo_id = created.json()["todo"]["id"]

    updated = client.put(f"/todos/{todo_id}", json={"title": "Buy oat milk"}, headers=auth_headers)
    assert updated.status_code == 200
    assert updated.json()["todo"]["title"] == "Buy oat milk"

    listed = client.get("/todos", headers=auth_headers)
    assert [todo["title"] for todo in listed.json()["todos"]] == ["Buy oat milk"]

    deleted = client.delete(f"/todos/{todo_id}", headers=auth_headers)
    assert deleted.status_code == 204

    assert client.get("/todos", headers=auth_headers).json() == {"todos": []}


def test_create_todo_trims_and_rejects_blank_title(client, auth_headers):
    response = client.post("/todos", json={"title": "  Walk dog  "}, headers=auth_headers)
    assert response.json()["todo"]["title"] == "Walk dog"

    blank = client.post("/todos", json={"title": "   "}, headers=auth_headers)
    assert blank.status_code == 400
    assert blank.json() == {"message": "Title is required"}

    missing = client.post("/todos", json={}, headers=auth_headers)
    assert missing.status_code == 400


def test_todos_are_listed_newest_first(client, auth_headers):
    for title in ("first", "second", "third"):
        client.post("/todos", json={"title": title}, headers=auth_headers)
    titles = [todo["title"] for todo in client.get("/todos", headers=auth_headers).json()["todos"]]
    assert titles == ["third", "second", "first"]


def test_todos_are_owner_scoped(client, auth_headers, other_headers):
    todo_id = client.post("/todos", json={"title": "Mine"}, headers=auth_headers).json()["todo"]["id"]

    assert client.get("/todos", headers=other_headers).json() == {"todos": []}
    assert client.put(f"/todos/{todo_id}", json={"title": "Theirs"}, headers=other_headers).status_code == 404
    assert client.delete(f"/todos/{todo_id}", headers=other_headers).status_code == 404
    assert client.get("/todos", headers=auth_headers).json()["todos"][0]["title"] == "Mine"


def test_missing_todo_is_not_found(client, auth_headers):
    response = client.delete("/todos/999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"message": "Todo not found"}


class TestTodoService:
    def test_update_validates_before_lookup(self, session, user):
        with pytest.raises(ValidationError):
            todo_service.update_todo(session, user.id, 999, "")

    def test_delete_twice(self, session, user):
        todo = todo_service.create_todo(session, user.id, "Once")
        todo_service.delete_todo(session, user.id, todo.id)
        with pytest.raises(TodoNotFound):
            todo_service.delete_todo(session, user.id, todo.id)
