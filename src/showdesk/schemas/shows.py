"""Show request/response schemas."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..models.domain import Act, ShowType
from ..services.parsing import parse_optional_amount, parse_optional_count

_TEXT_FIELDS = ("venue_name", "address_text", "maps_place_id", "hotel_name", "notes")
_AMOUNT_FIELDS = (
    "maps_lat",
    "maps_lng",
    "km_distance",
    "show_cost",
    "advance_paid",
    "viaticos_cobrados",
)


class ShowWrite(BaseModel):
    """Payload of the create and edit forms.

    Blank text becomes ``None`` and numeric inputs go through
    ``parse_optional_amount``, so an untouched field is stored as absent
    rather than as zero.
    """

    show_date: date
    artist: Act = Act.JEYF
    show_type: ShowType = ShowType.SHOWCASE
    event_name: str = Field(..., min_length=2)
    venue_name: Optional[str] = None

    address_text: Optional[str] = None
    maps_place_id: Optional[str] = None
    maps_lat: Optional[float] = Field(default=None, allow_inf_nan=False)
    maps_lng: Optional[float] = Field(default=None, allow_inf_nan=False)

    km_distance: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)

    hospitality: bool = False
    hotel_name: Optional[str] = None
    rooms_count: Optional[int] = Field(default=None, ge=0)

    show_cost: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    advance_paid: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    viaticos_cobrados: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)

    closed_date: Optional[date] = None
    notes: Optional[str] = None

    @field_validator("event_name", mode="before")
    @classmethod
    def _strip_name(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _blank_text_as_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip() or None
        return value

    @field_validator(*_AMOUNT_FIELDS, mode="before")
    @classmethod
    def _parse_amount(cls, value: Any) -> Optional[float]:
        return parse_optional_amount(value)

    @field_validator("rooms_count", mode="before")
    @classmethod
    def _parse_rooms(cls, value: Any) -> Optional[int]:
        return parse_optional_count(value)

    @field_validator("closed_date", mode="before")
    @classmethod
    def _blank_date_as_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def has_location(self) -> bool:
        return bool(self.maps_place_id or self.address_text)

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class ShowModel(BaseModel):
    id: str
    show_date: Optional[date] = None
    artist: Optional[Act] = None
    show_type: Optional[ShowType] = None
    event_name: Optional[str] = None
    venue_name: Optional[str] = None
    address_text: Optional[str] = None
    maps_place_id: Optional[str] = None
    maps_lat: Optional[float] = None
    maps_lng: Optional[float] = None
    km_distance: Optional[float] = None
    hospitality: bool = False
    hotel_name: Optional[str] = None
    rooms_count: Optional[int] = None
    show_cost: Optional[float] = None
    advance_paid: Optional[float] = None
    viaticos_cobrados: Optional[float] = None
    closed_date: Optional[date] = None
    notes: Optional[str] = None
    created_at: Optional[str] = None


class ListTotalsModel(BaseModel):
    showCost: float
    advance: float
    via: float


class ShowListResponse(BaseModel):
    items: List[ShowModel]
    count: int
    totals: Optional[ListTotalsModel] = None


class ShowMetricsModel(BaseModel):
    totalShows: int
    upcoming: int
    ingresos: float
    adelantos: float
    viaticos: float
    kmAvg: float


class ProfileModel(BaseModel):
    role: str
    full_name: Optional[str] = None
    artist_scope: Optional[str] = None
    act_scope: Optional[Act] = None
    act_label: Optional[str] = None
    capabilities: Dict[str, bool]


class DashboardResponse(BaseModel):
    profile: ProfileModel
    all: ShowMetricsModel
    byAct: Dict[str, ShowMetricsModel]
    upcomingShows: List[ShowModel]
    moneyVisible: bool
