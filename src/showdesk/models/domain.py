"""Domain models for shows and user profiles."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Mapping, Optional

from ..services.parsing import parse_optional_amount, parse_optional_count, parse_show_date


class Act(str, Enum):
    """Performing acts a show can be booked for."""

    JEYF = "JEYF"
    ELGUDI = "ELGUDI"

    @property
    def label(self) -> str:
        return {"JEYF": "Jey F", "ELGUDI": "El Gudi"}[self.value]

    @classmethod
    def parse(cls, value: Any) -> Optional["Act"]:
        """Exact match on the stored code; anything else is not a recognized act."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class ShowType(str, Enum):
    SHOWCASE = "SHOWCASE"
    SHOW_COMPLETO = "SHOW_COMPLETO"


class Role(str, Enum):
    """Closed set of roles a profile can hold."""

    ADMIN = "admin"
    STAFF = "staff"
    ARTIST = "artist"


@dataclass(slots=True)
class Profile:
    """The caller's row in ``profiles``."""

    role: Role
    full_name: Optional[str] = None
    artist_scope: Optional[str] = None


@dataclass(slots=True)
class Show:
    """A booked event as stored in ``shows`` (or ``shows_public`` without money fields)."""

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


def show_from_row(row: Mapping[str, Any]) -> Show:
    """Build a ``Show`` from a Supabase row; absent columns stay ``None``."""
    show_type = row.get("show_type")
    try:
        parsed_type = ShowType(show_type) if show_type else None
    except ValueError:
        parsed_type = None

    return Show(
        id=str(row["id"]),
        show_date=parse_show_date(row.get("show_date")),
        artist=Act.parse(row.get("artist")) if row.get("artist") else None,
        show_type=parsed_type,
        event_name=row.get("event_name"),
        venue_name=row.get("venue_name"),
        address_text=row.get("address_text"),
        maps_place_id=row.get("maps_place_id"),
        maps_lat=parse_optional_amount(row.get("maps_lat")),
        maps_lng=parse_optional_amount(row.get("maps_lng")),
        km_distance=parse_optional_amount(row.get("km_distance")),
        hospitality=bool(row.get("hospitality")),
        hotel_name=row.get("hotel_name"),
        rooms_count=parse_optional_count(row.get("rooms_count")),
        show_cost=parse_optional_amount(row.get("show_cost")),
        advance_paid=parse_optional_amount(row.get("advance_paid")),
        viaticos_cobrados=parse_optional_amount(row.get("viaticos_cobrados")),
        closed_date=parse_show_date(row.get("closed_date")),
        notes=row.get("notes"),
        created_at=row.get("created_at"),
    )
