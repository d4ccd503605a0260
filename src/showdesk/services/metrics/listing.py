"""Filtering and totals for the show list."""

from __future__ import annotations

from typing import Iterable, Optional

from ...models.domain import Act, Show
from ..parsing import parse_amount_or_zero


def filter_shows(
    shows: Iterable[Show],
    act: Optional[Act] = None,
    query: str = "",
    month: str = "",
) -> list[Show]:
    """Filter by act, free text over name/venue/address, and a ``YYYY-MM`` month."""
    text = (query or "").strip().lower()
    month = (month or "").strip()

    results: list[Show] = []
    for show in shows:
        if act is not None and show.artist != act:
            continue
        if text:
            haystacks = (show.event_name, show.venue_name, show.address_text)
            if not any(text in (value or "").lower() for value in haystacks):
                continue
        if month:
            iso_date = show.show_date.isoformat() if show.show_date else ""
            if not iso_date.startswith(month):
                continue
        results.append(show)
    return results


def compute_list_totals(shows: Iterable[Show]) -> dict:
    show_cost = 0.0
    advance = 0.0
    via = 0.0
    for show in shows:
        show_cost += parse_amount_or_zero(show.show_cost)
        advance += parse_amount_or_zero(show.advance_paid)
        via += parse_amount_or_zero(show.viaticos_cobrados)
    return {"showCost": show_cost, "advance": advance, "via": via}
