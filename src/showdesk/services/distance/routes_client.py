"""HTTP client for the Google Routes API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ...config import settings
from .errors import MissingCredential, NoRouteFound

# The Routes API returns an empty payload unless a field mask is sent.
DISTANCE_FIELD_MASK = "routes.distanceMeters"

logger = logging.getLogger(__name__)


class GoogleRoutesClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key or settings.google_maps_api_key
        if not self.api_key:
            raise MissingCredential("Google Maps API key is not configured.")
        self.base_url = base_url or settings.routes_api_url
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        # One client per lookup; the default httpx timeout is the only bound.
        return httpx.Client(transport=self._transport)

    def compute_route(self, origin_address: str, destination: dict[str, str]) -> dict[str, Any]:
        """Request a driving route and return the decoded payload.

        Raises:
            NoRouteFound: when the API answers with a non-success status.
        """
        headers = {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self.api_key,
            "X-Goog-FieldMask": DISTANCE_FIELD_MASK,
        }
        body = {
            "origin": {"address": origin_address},
            "destination": destination,
            "travelMode": "DRIVE",
            "units": "METRIC",
        }

        client = self._get_client()
        try:
            response = client.post(self.base_url, headers=headers, json=body)
            data = response.json()
        finally:
            client.close()

        if not response.is_success:
            logger.warning(f"Routes API returned HTTP {response.status_code} for destination {destination}")
            raise NoRouteFound(details=data, status=response.status_code)
        return data
