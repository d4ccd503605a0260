"""Places autocomplete and place details endpoints."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from ...auth.context import RequestContext
from ...config import settings
from ...schemas.distance import DistanceRequest
from ...schemas.places import PlaceSelectionModel, PlaceSuggestionModel, PlaceSuggestionsResponse
from ...services.booking import apply_place_selection, try_resolve_distance
from ...services.distance import DistanceResult
from ...services.places import PlaceSelection, PlacesClient, PlacesReadiness, PlacesStatus
from ..deps import (
    get_distance_normalizer,
    get_places_client_factory,
    get_places_readiness,
    get_request_context,
)

router = APIRouter(prefix="/places", tags=["places"])


class PlaceSelectRequest(BaseModel):
    place_id: str = Field(..., min_length=1)
    draft: Dict[str, Any] = Field(default_factory=dict, description="In-progress show fields")


class PlaceSelectResponse(BaseModel):
    draft: Dict[str, Any]
    distance_error: Optional[Dict[str, Any]] = None


def _require_form_access(context: RequestContext) -> None:
    if not (context.can_create_shows or context.can_edit_shows):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Places lookups are limited to show editors.")


def _require_ready(readiness: PlacesReadiness) -> None:
    if readiness.wait(settings.places_init_timeout_seconds) is not PlacesStatus.READY:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=readiness.reason or "Places autocomplete is unavailable.",
        )


def _load_place(client: PlacesClient, place_id: str) -> PlaceSelection:
    try:
        return client.place_details(place_id)
    except Exception as exc:
        logging.exception(f"Error loading place {place_id}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to load place details: {str(exc)}",
        ) from exc


@router.get("/autocomplete", response_model=PlaceSuggestionsResponse, status_code=status.HTTP_200_OK)
def autocomplete(
    input: str = Query(..., min_length=1, description="Partial address typed by the user"),
    readiness: PlacesReadiness = Depends(get_places_readiness),
    client_factory: Callable[[], PlacesClient] = Depends(get_places_client_factory),
    context: RequestContext = Depends(get_request_context),
) -> PlaceSuggestionsResponse:
    _require_form_access(context)
    _require_ready(readiness)
    client = client_factory()
    try:
        suggestions = client.autocomplete(input)
    except Exception as exc:
        logging.exception(f"Error fetching place suggestions: {exc}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to fetch place suggestions: {str(exc)}",
        ) from exc
    return PlaceSuggestionsResponse(
        input=input,
        suggestions=[PlaceSuggestionModel(place_id=s.place_id, text=s.text) for s in suggestions],
    )


@router.post("/select", response_model=PlaceSelectResponse, status_code=status.HTTP_200_OK)
def select_place(
    payload: PlaceSelectRequest,
    readiness: PlacesReadiness = Depends(get_places_readiness),
    client_factory: Callable[[], PlacesClient] = Depends(get_places_client_factory),
    context: RequestContext = Depends(get_request_context),
    normalizer: Callable[[DistanceRequest], DistanceResult] = Depends(get_distance_normalizer),
) -> PlaceSelectResponse:
    """Merge a picked place into a draft show and recompute its distance."""
    _require_form_access(context)
    _require_ready(readiness)
    selection = _load_place(client_factory(), payload.place_id)

    draft = apply_place_selection(payload.draft, selection)
    draft, error = try_resolve_distance(draft, normalizer)
    return PlaceSelectResponse(draft=draft, distance_error=error.to_payload() if error else None)


@router.get("/{place_id}", response_model=PlaceSelectionModel, status_code=status.HTTP_200_OK)
def get_place(
    place_id: str,
    readiness: PlacesReadiness = Depends(get_places_readiness),
    client_factory: Callable[[], PlacesClient] = Depends(get_places_client_factory),
    context: RequestContext = Depends(get_request_context),
) -> PlaceSelectionModel:
    _require_form_access(context)
    _require_ready(readiness)
    selection = _load_place(client_factory(), place_id)
    return PlaceSelectionModel(
        place_id=selection.place_id,
        formatted_address=selection.formatted_address,
        lat=selection.lat,
        lng=selection.lng,
    )
