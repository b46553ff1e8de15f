# tests/test_users.py


def test_create_user(client):
    r = client.post("/api/users", json={"login": "alice", "email": "alice@example.com"})
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["login"] == "alice"
    assert body["email"] == "alice@example.com"
    assert r.headers["location"] == "/api/users/alice"

    r = client.get("/api/users/alice")
    assert r.status_code == 200
    assert r.json()["id"] == body["id"]


def test_duplicate_login_is_rejected(client, create_user):
    create_user("alice")
    r = client.post("/api/users", json={"login": "alice"})
    assert r.status_code == 400
    body = r.json()
    assert body["errorKey"] == "loginexists"
    assert body["entityName"] == "userManagement"


def test_invalid_login_is_rejected(client):
    assert client.post("/api/users", json={"login": "no spaces"}).status_code == 422
    assert client.post("/api/users", json={"login": ""}).status_code == 422


def test_get_unknown_user_returns_404(client):
    r = client.get("/api/users/ghost")
    assert r.status_code == 404
    assert r.json()["entityName"] == "user"
