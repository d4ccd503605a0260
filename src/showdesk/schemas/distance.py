"""Distance request/response schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DistanceRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    destination_place_id: Optional[str] = Field(default=None, alias="destinationPlaceId")
    destination_address: Optional[str] = Field(default=None, alias="destinationAddress")

    @field_validator("destination_place_id", "destination_address", mode="before")
    @classmethod
    def _blank_as_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class DistanceResponse(BaseModel):
    km: float
    meters: int | float
