from fastapi.testclient import TestClient

from src.showdesk.main import create_app


def test_health_reports_places_status():
    client = TestClient(create_app())

    response = client.get("/api/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["places"] in {"ready", "unavailable"}


def test_root_lists_service():
    payload = TestClient(create_app()).get("/").json()
    assert payload["status"] == "running"
    assert payload["health"] == "/api/health"
