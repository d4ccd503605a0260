"""Distance lookups against the Google Routes API."""

from .errors import (
    DistanceError,
    MalformedResponse,
    MissingCredential,
    MissingDestination,
    NoRouteFound,
    ServerError,
)
from .routes_client import GoogleRoutesClient
from .service import DistanceResult, meters_to_km, normalize_distance

__all__ = [
    "DistanceError",
    "DistanceResult",
    "GoogleRoutesClient",
    "MalformedResponse",
    "MissingCredential",
    "MissingDestination",
    "NoRouteFound",
    "ServerError",
    "meters_to_km",
    "normalize_distance",
]
