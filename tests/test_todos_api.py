"""Per-user to-do list."""


def add(client, headers, text, **extra):
    return client.post("/api/todos", json={"text": text, **extra}, headers=headers)


def test_todos_require_login(client):
    assert client.get("/api/todos").status_code == 401


def test_create_and_list(client, auth_headers):
    response = add(client, auth_headers, "Call supplier", priority="high")

    assert response.status_code == 201
    assert response.json()["completed"] is False
    assert response.json()["priority"] == "high"
    assert [t["text"] for t in client.get("/api/todos", headers=auth_headers).json()] == ["Call supplier"]


def test_invalid_priority(client, auth_headers):
    assert add(client, auth_headers, "x", priority="urgent").status_code == 400


def test_complete_filter_search_and_stats(client, auth_headers):
    first = add(client, auth_headers, "Call supplier").json()
    add(client, auth_headers, "Send invoice")

    client.patch(f"/api/todos/{first['_id']}", json={"completed": True}, headers=auth_headers)

    open_items = client.get("/api/todos", params={"showCompleted": "false"}, headers=auth_headers).json()
    assert [t["text"] for t in open_items] == ["Send invoice"]

    found = client.get("/api/todos", params={"search": "SUPPLIER"}, headers=auth_headers).json()
    assert [t["text"] for t in found] == ["Call supplier"]

    stats = client.get("/api/todos/stats", headers=auth_headers).json()
    assert stats == {"total": 2, "completed": 1, "pending": 1}


def test_delete(client, auth_headers):
    todo_id = add(client, auth_headers, "Call supplier").json()["_id"]
    assert client.delete(f"/api/todos/{todo_id}", headers=auth_headers).status_code == 200
    assert client.delete(f"/api/todos/{todo_id}", headers=auth_headers).status_code == 404


def test_todos_are_private(client, auth_headers):
    todo_id = add(client, auth_headers, "Call supplier").json()["_id"]

    client.post("/api/register", json={"username": "other", "email": "other@example.com", "password": "pw"})
    token = client.post("/api/login", json={"email": "other@example.com", "password": "pw"}).json()["access_token"]
    other = {"Authorization": f"Bearer {token}"}

    assert client.get("/api/todos", headers=other).json() == []
    assert client.patch(f"/api/todos/{todo_id}", json={"completed": True}, headers=other).status_code == 404
    assert client.delete(f"/api/todos/{todo_id}", headers=other).status_code == 404


def test_null_cannot_clear_a_required_field(client, auth_headers):
    todo_id = add(client, auth_headers, "Call supplier").json()["_id"]

    for field in ("text", "category", "priority", "completed"):
        response = client.patch(f"/api/todos/{todo_id}", json={field: None}, headers=auth_headers)
        assert response.status_code == 400, field

    listed = client.get("/api/todos", headers=auth_headers)
    assert listed.status_code == 200
    assert listed.json()[0]["text"] == "Call supplier"
