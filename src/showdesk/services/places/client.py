"""HTTP client for Places API (New) autocomplete and place details."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import httpx

from ...config import settings

AUTOCOMPLETE_FIELD_MASK = "suggestions.placePrediction.placeId,suggestions.placePrediction.text.text"
DETAILS_FIELD_MASK = "id,formattedAddress,location"


@dataclass(slots=True)
class PlaceSuggestion:
    place_id: str
    text: str


@dataclass(slots=True)
class PlaceSelection:
    """What the autocomplete hands over once a place is picked."""

    place_id: str
    formatted_address: str
    lat: Optional[float] = None
    lng: Optional[float] = None


class PlacesClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        region_codes: Sequence[str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key or settings.google_maps_api_key
        if not self.api_key:
            raise ValueError("Google Maps API key is not configured.")
        self.base_url = (base_url or settings.places_api_url).rstrip("/")
        self.region_codes = tuple(region_codes if region_codes is not None else settings.places_region_codes)
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        return httpx.Client(transport=self._transport)

    def _headers(self, field_mask: str) -> dict[str, str]:
        return {"X-Goog-Api-Key": self.api_key, "X-Goog-FieldMask": field_mask}

    def autocomplete(self, text: str) -> list[PlaceSuggestion]:
        body: dict = {"input": text}
        if self.region_codes:
            body["includedRegionCodes"] = list(self.region_codes)

        client = self._get_client()
        try:
            response = client.post(
                f"{self.base_url}/places:autocomplete",
                headers=self._headers(AUTOCOMPLETE_FIELD_MASK),
                json=body,
            )
            response.raise_for_status()
            data = response.json()
        finally:
            client.close()

        suggestions: list[PlaceSuggestion] = []
        for item in data.get("suggestions", []):
            prediction = item.get("placePrediction") or {}
            place_id = prediction.get("placeId")
            if not place_id:
                continue
            suggestions.append(
                PlaceSuggestion(place_id=place_id, text=(prediction.get("text") or {}).get("text", ""))
            )
        return suggestions

    def place_details(self, place_id: str) -> PlaceSelection:
        client = self._get_client()
        try:
            response = client.get(
                f"{self.base_url}/places/{place_id}",
                headers=self._headers(DETAILS_FIELD_MASK),
            )
            response.raise_for_status()
            data = response.json()
        finally:
            client.close()

        location = data.get("location") or {}
        return PlaceSelection(
            place_id=data.get("id") or place_id,
            formatted_address=data.get("formattedAddress", ""),
            lat=location.get("latitude"),
            lng=location.get("longitude"),
        )
