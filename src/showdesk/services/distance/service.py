"""Distance normalization: destination reference -> kilometers from home base."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from ...config import settings
from ...schemas.distance import DistanceRequest
from .errors import DistanceError, MalformedResponse, MissingDestination, ServerError
from .routes_client import GoogleRoutesClient


@dataclass(slots=True)
class DistanceResult:
    km: float
    meters: int | float


def meters_to_km(meters: int | float) -> float:
    """Convert meters to kilometers, rounding the float value scaled by 100 half-up."""
    return math.floor(meters / 1000 * 100 + 0.5) / 100


def resolve_destination(payload: DistanceRequest) -> dict[str, str]:
    """Pick the Routes API destination, preferring the place id over the address."""
    if payload.destination_place_id:
        return {"placeId": payload.destination_place_id}
    if payload.destination_address:
        return {"address": payload.destination_address}
    raise MissingDestination("No destination given.")


def extract_distance_meters(data: Any) -> int | float:
    routes = data.get("routes") if isinstance(data, dict) else None
    first = routes[0] if isinstance(routes, list) and routes else None
    meters = first.get("distanceMeters") if isinstance(first, dict) else None
    if isinstance(meters, bool) or not isinstance(meters, (int, float)):
        raise MalformedResponse(details=data)
    return meters


def normalize_distance(
    payload: DistanceRequest,
    client: GoogleRoutesClient | None = None,
    origin_address: str | None = None,
) -> DistanceResult:
    """Compute the driving distance from the home base to ``payload``'s destination.

    One request per call; nothing is retried or cached. Every failure surfaces
    as a ``DistanceError`` subclass.
    """
    try:
        if client is None:
            client = GoogleRoutesClient()
        destination = resolve_destination(payload)
        data = client.compute_route(origin_address or settings.origin_address, destination)
        meters = extract_distance_meters(data)
        return DistanceResult(km=meters_to_km(meters), meters=meters)
    except DistanceError:
        raise
    except Exception as exc:
        raise ServerError(str(exc)) from exc
