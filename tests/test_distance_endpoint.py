import httpx
import pytest

from src.showdesk import config
from src.showdesk.services.distance import GoogleRoutesClient, normalize_distance


def _provider(handler):
    def normalizer(payload):
        client = GoogleRoutesClient(api_key="test-key", transport=httpx.MockTransport(handler))
        return normalize_distance(payload, client=client)

    return normalizer


def test_distance_success(make_client):
    client = make_client(
        normalizer=_provider(lambda request: httpx.Response(200, json={"routes": [{"distanceMeters": 98765}]}))
    )

    response = client.post("/api/distance", json={"destinationPlaceId": "ChIJ-place"})

    assert response.status_code == 200
    assert response.json() == {"km": 98.77, "meters": 98765}


def test_distance_without_credential(make_client, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config.settings, "google_maps_api_key", None)
    client = make_client()

    response = client.post("/api/distance", json={"destinationAddress": "Xalapa"})

    assert response.status_code == 500
    assert response.json() == {"error": "Falta GOOGLE_MAPS_API_KEY en .env.local"}


def test_distance_without_destination(make_client, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config.settings, "google_maps_api_key", "configured-key")
    client = make_client()

    response = client.post("/api/distance", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "Manda destinationPlaceId o destinationAddress"}


def test_distance_provider_error(make_client):
    details = {"error": {"code": 404, "message": "NOT_FOUND"}}
    client = make_client(normalizer=_provider(lambda request: httpx.Response(404, json=details)))

    response = client.post("/api/distance", json={"destinationAddress": "???"})

    assert response.status_code == 500
    assert response.json() == {"error": "Google Routes API error", "details": details, "status": 404}


def test_distance_malformed_payload(make_client):
    client = make_client(normalizer=_provider(lambda request: httpx.Response(200, json={})))

    response = client.post("/api/distance", json={"destinationPlaceId": "p"})

    assert response.status_code == 500
    assert response.json() == {"error": "No llegó distanceMeters", "details": {}}


def test_distance_invalid_json_body(make_client):
    client = make_client(normalizer=_provider(lambda request: httpx.Response(200, json={})))

    response = client.post(
        "/api/distance",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 500
    payload = response.json()
    assert payload["error"] == "Server error"
    assert payload["details"]
