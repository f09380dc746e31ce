import json
import pytest
from fastapi.testclient import TestClient

# Add backend to path
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "backend"))

import main
from main import app

client = TestClient(app)

def test_root_endpoint():
    """Test root endpoint returns service info"""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["service"] == "Pulse Gateway"
    assert data["status"] == "active"

def test_health_endpoint():
    """Health reports ok and a non-negative uptime in seconds"""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert isinstance(data["uptime"], (int, float))
    assert data["uptime"] >= 0

def test_dashboard_serves_seed():
    response = client.get("/dashboard")
    assert response.status_code == 200
    data = response.json()
    assert isinstance(data["metrics"], list)
    assert isinstance(data["transactions"], list)
    assert len(data["transactions"]) == 10
    assert data["transactions"][0]["id"] == "txn_091"

def test_dashboard_normalizes_missing_arrays(tmp_path, monkeypatch):
    seed = tmp_path / "seed.json"
    seed.write_text(json.dumps({"metrics": "oops", "generated_by": "tests"}))
    monkeypatch.setattr(main, "SEED_PATH", seed)

    response = client.get("/dashboard")
    assert response.status_code == 200
    data = response.json()
    assert data["metrics"] == []
    assert data["transactions"] == []
    assert data["generated_by"] == "tests"

def test_dashboard_missing_seed_returns_generic_error(tmp_path, monkeypatch):
    monkeypatch.setattr(main, "SEED_PATH", tmp_path / "missing.json")
    response = client.get("/dashboard")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}

def test_dashboard_malformed_seed_returns_generic_error(tmp_path, monkeypatch):
    seed = tmp_path / "seed.json"
    seed.write_text("{not json")
    monkeypatch.setattr(main, "SEED_PATH", seed)
    response = client.get("/dashboard")
    assert response.status_code == 500
    assert response.json()["error"] == "Internal server error"

def test_unknown_route_json_404():
    response = client.get("/nope", headers={"Accept": "application/json"})
    assert response.status_code == 404
    assert response.json() == {"error": "Route not found"}

def test_unknown_route_html_404():
    response = client.get("/nope", headers={"Accept": "text/html"})
    assert response.status_code == 404
    assert "404" in response.text
    assert response.headers["content-type"].startswith("text/html")

def test_static_demo_snapshot_is_served():
    response = client.get("/static/data.json")
    assert response.status_code == 200
    assert "transactions" in response.json()

def test_unhandled_error_returns_generic_500(monkeypatch):
    def explode(path=None):
        raise RuntimeError("boom")
    monkeypatch.setattr(main, "read_seed", explode)

    safe_client = TestClient(app, raise_server_exceptions=False)
    response = safe_client.get("/dashboard")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
