from fastapi.testclient import TestClient

from lingomentor.main import app


def test_root_and_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    root = client.get("/").json()
    assert root["status"] == "running"
    assert root["endpoints"]["users"] == "/api/users"


def test_missing_fields_message(client):
    resp = client.post("/api/users", json={"name": "x"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required fields: email"}


def test_invalid_value_message(client):
    resp = client.get("/api/users/not-a-number")
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("Invalid value for user_id")


def test_unknown_route_uses_error_body(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}


def test_unexpected_errors_are_json(client, monkeypatch):
    def broken(db):
        raise RuntimeError("corrupt row")

    monkeypatch.setattr("lingomentor.services.mentors.list_mentors", broken)
    resp = TestClient(app, raise_server_exceptions=False).get("/api/mentors")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal Server Error"}
