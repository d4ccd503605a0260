"""Route group exports."""

from . import auth, dashboard, distance, health, places, shows

__all__ = ["auth", "dashboard", "distance", "health", "places", "shows"]
