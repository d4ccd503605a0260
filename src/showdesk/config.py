"""Application configuration and settings management."""

from typing import Any, Optional

import json
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="SHOWDESK_",
        case_sensitive=False,
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Showdesk API"
    api_prefix: str = "/api"
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    # Distance lookups
    google_maps_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_MAPS_API_KEY", "SHOWDESK_GOOGLE_MAPS_API_KEY"),
        description="Google Maps Platform key used for Routes and Places requests.",
    )
    origin_address: str = Field(
        default="El Morro, Boca del Río, Veracruz, México",
        description="Home base every show distance is measured from.",
    )
    routes_api_url: str = Field(
        default="https://routes.googleapis.com/directions/v2:computeRoutes",
        description="Google Routes computeRoutes endpoint.",
    )

    # Places autocomplete
    places_api_url: str = Field(
        default="https://places.googleapis.com/v1",
        description="Base URL for Places API (New).",
    )
    places_region_codes: tuple[str, ...] = Field(default=("mx",))
    places_init_timeout_seconds: float = Field(default=9.0, ge=0.0)

    upcoming_preview_limit: int = Field(default=8, ge=1)

    # Supabase configuration
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co).",
    )
    supabase_key: Optional[str] = Field(
        default=None,
        description="Supabase anon key. Queries run with the caller's JWT so row-level security applies.",
    )

    @field_validator("frontend_allowed_origins", "places_region_codes", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
