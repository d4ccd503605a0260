"""Show analytics helpers."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any, Iterable, Optional, Sequence

from ...models.domain import Act
from ..parsing import parse_amount_or_zero, parse_show_date


def _value(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def is_upcoming(record: Any, today: Optional[date] = None) -> bool:
    """True when the show date is today or later, compared by calendar date only."""
    show_date = parse_show_date(_value(record, "show_date"))
    if show_date is None:
        return False
    return show_date >= (today or date.today())


def compute_show_metrics(records: Iterable[Any], today: Optional[date] = None) -> dict:
    """Summarize a collection of shows.

    ``today`` defaults to the local calendar date. Amounts that are absent or
    not numeric count as zero; ``kmAvg`` only averages strictly positive
    distances and is ``0`` when there are none.
    """
    rows = list(records)
    today = today or date.today()

    upcoming = sum(1 for row in rows if is_upcoming(row, today))
    ingresos = sum(parse_amount_or_zero(_value(row, "show_cost")) for row in rows)
    adelantos = sum(parse_amount_or_zero(_value(row, "advance_paid")) for row in rows)
    viaticos = sum(parse_amount_or_zero(_value(row, "viaticos_cobrados")) for row in rows)

    km_values = [parse_amount_or_zero(_value(row, "km_distance")) for row in rows]
    km_values = [km for km in km_values if km > 0]
    km_avg = sum(km_values) / len(km_values) if km_values else 0

    return {
        "totalShows": len(rows),
        "upcoming": upcoming,
        "ingresos": ingresos,
        "adelantos": adelantos,
        "viaticos": viaticos,
        "kmAvg": km_avg,
    }


def partition_by_act(records: Iterable[Any]) -> dict[Act, list]:
    """Split records per act. Records without a recognized act land in no partition."""
    partitions: dict[Act, list] = {act: [] for act in Act}
    for record in records:
        act = Act.parse(_value(record, "artist"))
        if act is not None:
            partitions[act].append(record)
    return partitions


def upcoming_shows(records: Sequence[Any], limit: int, today: Optional[date] = None) -> list:
    today = today or date.today()
    return [record for record in records if is_upcoming(record, today)][: max(limit, 0)]


def build_dashboard(records: Sequence[Any], limit: int = 8, today: Optional[date] = None) -> dict:
    """Metrics for every show and for each act, plus the next ``limit`` shows."""
    today = today or date.today()
    partitions = partition_by_act(records)
    return {
        "all": compute_show_metrics(records, today),
        "byAct": {act.value: compute_show_metrics(rows, today) for act, rows in partitions.items()},
        "upcomingShows": upcoming_shows(records, limit, today),
    }
