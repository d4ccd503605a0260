"""Assembling show records before they are persisted."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..schemas.distance import DistanceRequest
from ..schemas.shows import ShowWrite
from .distance import DistanceError, DistanceResult, normalize_distance
from .places.client import PlaceSelection

logger = logging.getLogger(__name__)

Normalizer = Callable[[DistanceRequest], DistanceResult]


def distance_request_for(place_id: Optional[str], address: Optional[str]) -> DistanceRequest:
    # The address is only sent when there is no place id.
    return DistanceRequest(
        destination_place_id=place_id or None,
        destination_address=None if place_id else (address or None),
    )


def merge_distance(record: dict[str, Any], result: DistanceResult) -> dict[str, Any]:
    return {**record, "km_distance": result.km}


def apply_place_selection(record: dict[str, Any], selection: PlaceSelection) -> dict[str, Any]:
    """Copy a picked place into a draft record and clear its distance."""
    return {
        **record,
        "address_text": selection.formatted_address or record.get("address_text"),
        "maps_place_id": selection.place_id,
        "maps_lat": selection.lat if selection.lat is not None else record.get("maps_lat"),
        "maps_lng": selection.lng if selection.lng is not None else record.get("maps_lng"),
        "km_distance": None,
    }


def try_resolve_distance(
    record: dict[str, Any],
    normalizer: Normalizer = normalize_distance,
) -> tuple[dict[str, Any], Optional[DistanceError]]:
    """Fill ``km_distance`` from the record's location; failures leave it empty."""
    request = distance_request_for(record.get("maps_place_id"), record.get("address_text"))
    try:
        result = normalizer(request)
    except DistanceError as exc:
        logger.warning(f"Distance lookup failed for '{record.get('event_name')}': {exc.to_payload()}")
        return {**record, "km_distance": None}, exc
    return merge_distance(record, result), None


def prepare_show_record(
    payload: ShowWrite,
    resolve_distance: bool = False,
    normalizer: Normalizer = normalize_distance,
) -> dict[str, Any]:
    record = payload.to_record()
    # A distance typed in by hand always wins over a lookup.
    if resolve_distance and payload.km_distance is None and payload.has_location:
        record, _ = try_resolve_distance(record, normalizer)
    return record
