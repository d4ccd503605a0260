"""Failures of a distance lookup, each mapped to an HTTP status and JSON body."""

from __future__ import annotations

from typing import Any


class DistanceError(Exception):
    status_code = 500
    error = "Server error"

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.error}


class MissingCredential(DistanceError):
    """No Google Maps key is configured for this process."""

    error = "Falta GOOGLE_MAPS_API_KEY en .env.local"


class MissingDestination(DistanceError):
    """Neither a place id nor an address was sent."""

    status_code = 400
    error = "Manda destinationPlaceId o destinationAddress"


class NoRouteFound(DistanceError):
    """The Routes API answered with a non-success status."""

    error = "Google Routes API error"

    def __init__(self, details: Any, status: int) -> None:
        super().__init__(f"{self.error} (HTTP {status})")
        self.details = details
        self.status = status

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.error, "details": self.details, "status": self.status}


class MalformedResponse(DistanceError):
    """The Routes API succeeded but sent no numeric ``distanceMeters``."""

    error = "No llegó distanceMeters"

    def __init__(self, details: Any) -> None:
        super().__init__(self.error)
        self.details = details

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.error, "details": self.details}


class ServerError(DistanceError):
    """Any other fault while computing a distance."""

    def __init__(self, details: str) -> None:
        super().__init__(details)
        self.details = details

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.error, "details": self.details}
