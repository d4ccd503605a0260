"""Places autocomplete schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class PlaceSuggestionModel(BaseModel):
    place_id: str
    text: str


class PlaceSuggestionsResponse(BaseModel):
    input: str
    suggestions: List[PlaceSuggestionModel]


class PlaceSelectionModel(BaseModel):
    place_id: str
    formatted_address: str
    lat: Optional[float] = None
    lng: Optional[float] = None
