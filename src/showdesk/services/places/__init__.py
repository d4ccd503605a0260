"""Places autocomplete helpers."""

from .client import PlaceSelection, PlaceSuggestion, PlacesClient
from .readiness import PlacesReadiness, PlacesStatus, initialize_places

__all__ = [
    "PlaceSelection",
    "PlaceSuggestion",
    "PlacesClient",
    "PlacesReadiness",
    "PlacesStatus",
    "initialize_places",
]
