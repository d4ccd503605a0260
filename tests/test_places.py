import json
import threading

import httpx
from fastapi.testclient import TestClient

from src.showdesk.api.deps import get_distance_normalizer, get_places_client_factory, get_request_context
from src.showdesk.main import create_app
from src.showdesk.models.domain import Role
from src.showdesk.services.booking import apply_place_selection
from src.showdesk.services.distance import DistanceResult, MalformedResponse
from src.showdesk.services.places import (
    PlaceSelection,
    PlaceSuggestion,
    PlacesClient,
    PlacesReadiness,
    PlacesStatus,
    initialize_places,
)
from tests._helpers.fakes import make_context


def test_readiness_times_out_to_unavailable():
    readiness = PlacesReadiness()

    assert readiness.wait(timeout=0.01) is PlacesStatus.UNAVAILABLE
    # Terminal: a late success does not flip it back.
    assert readiness.mark_ready() is PlacesStatus.UNAVAILABLE
    assert readiness.status is PlacesStatus.UNAVAILABLE


def test_readiness_resolved_from_another_thread():
    readiness = PlacesReadiness()
    threading.Timer(0.01, readiness.mark_ready).start()

    assert readiness.wait(timeout=2.0) is PlacesStatus.READY


def test_initialize_without_key_is_unavailable():
    readiness = PlacesReadiness()
    assert initialize_places(readiness, None) is PlacesStatus.UNAVAILABLE
    assert "not configured" in readiness.reason
    assert initialize_places(PlacesReadiness(), "key") is PlacesStatus.READY


def test_places_client_autocomplete_and_details():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path.endswith("places:autocomplete"):
            return httpx.Response(
                200,
                json={
                    "suggestions": [
                        {"placePrediction": {"placeId": "p1", "text": {"text": "Xalapa, Ver., México"}}},
                        {"queryPrediction": {"text": {"text": "xalapa"}}},
                    ]
                },
            )
        return httpx.Response(
            200,
            json={"id": "p1", "formattedAddress": "Xalapa, Ver., México", "location": {"latitude": 19.54, "longitude": -96.91}},
        )

    client = PlacesClient(api_key="k", base_url="https://places.test/v1", region_codes=("mx",), transport=httpx.MockTransport(handler))

    assert client.autocomplete("xala") == [PlaceSuggestion(place_id="p1", text="Xalapa, Ver., México")]
    assert json.loads(seen[0].content) == {"input": "xala", "includedRegionCodes": ["mx"]}

    selection = client.place_details("p1")
    assert selection == PlaceSelection(place_id="p1", formatted_address="Xalapa, Ver., México", lat=19.54, lng=-96.91)
    assert seen[1].headers["X-Goog-FieldMask"] == "id,formattedAddress,location"


def test_apply_place_selection_clears_distance():
    draft = {"event_name": "Boda", "address_text": "old", "maps_lat": 1.0, "km_distance": 55.0}

    merged = apply_place_selection(draft, PlaceSelection(place_id="p1", formatted_address="Xalapa", lat=None, lng=-96.9))

    assert merged["address_text"] == "Xalapa"
    assert merged["maps_place_id"] == "p1"
    assert merged["maps_lat"] == 1.0
    assert merged["maps_lng"] == -96.9
    assert merged["km_distance"] is None
    assert draft["km_distance"] == 55.0


class _FakePlaces:
    def autocomplete(self, text):
        return [PlaceSuggestion(place_id="p1", text=f"{text} result")]

    def place_details(self, place_id):
        return PlaceSelection(place_id=place_id, formatted_address="Córdoba, Ver.", lat=18.88, lng=-96.93)


def _app(role: Role, ready: bool, normalizer=None):
    app = create_app()
    app.state.places_readiness = PlacesReadiness()
    initialize_places(app.state.places_readiness, "key" if ready else None)
    context = make_context(role)
    app.dependency_overrides[get_request_context] = lambda: context
    app.dependency_overrides[get_places_client_factory] = lambda: _FakePlaces
    if normalizer is not None:
        app.dependency_overrides[get_distance_normalizer] = lambda: normalizer
    return TestClient(app)


def test_autocomplete_endpoint():
    response = _app(Role.ADMIN, ready=True).get("/api/places/autocomplete", params={"input": "Cor"})
    assert response.status_code == 200
    assert response.json()["suggestions"] == [{"place_id": "p1", "text": "Cor result"}]


def test_places_unavailable_returns_503():
    response = _app(Role.ADMIN, ready=False).get("/api/places/autocomplete", params={"input": "Cor"})
    assert response.status_code == 503


def test_places_limited_to_editors():
    response = _app(Role.ARTIST, ready=True).get("/api/places/autocomplete", params={"input": "Cor"})
    assert response.status_code == 403


def test_select_place_merges_and_computes_distance():
    requests = []

    def normalizer(request):
        requests.append(request)
        return DistanceResult(km=101.5, meters=101500)

    client = _app(Role.STAFF, ready=True, normalizer=normalizer)
    response = client.post("/api/places/select", json={"place_id": "p7", "draft": {"event_name": "Boda"}})

    assert response.status_code == 200
    payload = response.json()
    assert payload["draft"]["maps_place_id"] == "p7"
    assert payload["draft"]["km_distance"] == 101.5
    assert payload["distance_error"] is None
    assert requests[0].destination_place_id == "p7"


def test_select_place_reports_distance_error():
    details = {"status": "OK"}

    def normalizer(request):
        raise MalformedResponse(details=details)

    client = _app(Role.ADMIN, ready=True, normalizer=normalizer)
    response = client.post("/api/places/select", json={"place_id": "p7"})

    payload = response.json()
    assert payload["draft"]["km_distance"] is None
    assert payload["distance_error"] == {"error": "No llegó distanceMeters", "details": details}


def test_place_details_endpoint():
    client = _app(Role.STAFF, ready=True)

    response = client.get("/api/places/p42")

    assert response.status_code == 200
    assert response.json() == {
        "place_id": "p42",
        "formatted_address": "Córdoba, Ver.",
        "lat": 18.88,
        "lng": -96.93,
    }
    assert client.get("/api/places/autocomplete", params={"input": "Cor"}).status_code == 200


def test_place_details_upstream_failure_is_bad_gateway():
    class _BrokenPlaces(_FakePlaces):
        def place_details(self, place_id):
            raise httpx.ConnectError("places down")

    client = _app(Role.ADMIN, ready=True)
    client.app.dependency_overrides[get_places_client_factory] = lambda: _BrokenPlaces

    response = client.get("/api/places/p42")

    assert response.status_code == 502
    assert "places down" in response.json()["detail"]
    assert _app(Role.ARTIST, ready=True).get("/api/places/p42").status_code == 403
