from fastapi.testclient import TestClient

from planner.api.main import app, _cors_origins
from planner.errors import ClientError


@app.get("/__test__/boom")
def _boom():
    raise RuntimeError("unexpected")


@app.get("/__test__/teapot")
def _teapot():
    raise ClientError("No coffee here.", status_code=418)


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "planner-service"}


def test_client_error_rendered_with_status():
    r = TestClient(app).get("/__test__/teapot")
    assert r.status_code == 418
    assert r.json() == {"message": "No coffee here."}


def test_unexpected_error_is_500_with_generic_message():
    r = TestClient(app, raise_server_exceptions=False).get("/__test__/boom")
    assert r.status_code == 500
    assert r.json() == {"message": "Internal server error"}


def test_validation_errors_grouped_by_field(client):
    r = client.post("/trips", json={"destination": "Rio"})
    assert r.status_code == 400
    errors = r.json()["errors"]
    assert {"destination", "starts_at", "ends_at", "owner_name", "owner_email"} <= set(errors)
    assert all(isinstance(msgs, list) and msgs for msgs in errors.values())


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example.com, https://b.example.com,")
    assert _cors_origins() == ["https://a.example.com", "https://b.example.com"]


def test_cors_origins_default(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert "http://localhost:3000" in _cors_origins()
