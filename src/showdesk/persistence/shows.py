"""Supabase persistence for shows and profiles."""

from __future__ import annotations

import logging
from typing import Any

from supabase import Client

from ..auth.context import profile_from_row
from ..models.domain import Profile, Show, show_from_row

SHOWS_TABLE = "shows"
# Read-only view without the money columns.
SHOWS_PUBLIC_VIEW = "shows_public"
PROFILES_TABLE = "profiles"

PUBLIC_COLUMNS = (
    "id, created_at, show_date, artist, show_type, event_name, venue_name, address_text, "
    "maps_place_id, maps_lat, maps_lng, km_distance, hospitality, hotel_name, rooms_count, "
    "closed_date, notes"
)
MONEY_COLUMNS = "show_cost, advance_paid, viaticos_cobrados"
ALL_COLUMNS = f"{PUBLIC_COLUMNS}, {MONEY_COLUMNS}"

logger = logging.getLogger(__name__)


class ShowRepository:
    """CRUD over the ``shows`` table using a client scoped to the caller."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def list_shows(self, include_money: bool = True) -> list[Show]:
        source = SHOWS_TABLE if include_money else SHOWS_PUBLIC_VIEW
        columns = ALL_COLUMNS if include_money else PUBLIC_COLUMNS
        response = self.client.table(source).select(columns).order("show_date", desc=False).execute()
        rows = response.data or []
        logger.info(f"Loaded {len(rows)} shows from '{source}'")
        return [show_from_row(row) for row in rows]

    def get_show(self, show_id: str) -> Show | None:
        response = (
            self.client.table(SHOWS_TABLE)
            .select(ALL_COLUMNS)
            .eq("id", show_id)
            .maybe_single()
            .execute()
        )
        if response is None or not response.data:
            return None
        return show_from_row(response.data)

    def create_show(self, record: dict[str, Any]) -> Show:
        response = self.client.table(SHOWS_TABLE).insert(record).execute()
        rows = response.data or []
        if not rows:
            raise RuntimeError("Insert returned no row; check row-level security for 'shows'.")
        return show_from_row(rows[0])

    def update_show(self, show_id: str, record: dict[str, Any]) -> Show | None:
        response = self.client.table(SHOWS_TABLE).update(record).eq("id", show_id).execute()
        rows = response.data or []
        return show_from_row(rows[0]) if rows else None

    def delete_show(self, show_id: str) -> bool:
        response = self.client.table(SHOWS_TABLE).delete().eq("id", show_id).execute()
        return bool(response.data)


def load_profile(client: Client, user_id: str) -> Profile | None:
    response = (
        client.table(PROFILES_TABLE)
        .select("role, full_name, artist_scope")
        .eq("id", user_id)
        .maybe_single()
        .execute()
    )
    if response is None or not response.data:
        return None
    return profile_from_row(response.data)
