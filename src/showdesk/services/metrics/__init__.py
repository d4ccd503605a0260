"""Show metrics and list helpers."""

from .listing import compute_list_totals, filter_shows
from .stats import (
    build_dashboard,
    compute_show_metrics,
    is_upcoming,
    partition_by_act,
    upcoming_shows,
)

__all__ = [
    "build_dashboard",
    "compute_list_totals",
    "compute_show_metrics",
    "filter_shows",
    "is_upcoming",
    "partition_by_act",
    "upcoming_shows",
]
