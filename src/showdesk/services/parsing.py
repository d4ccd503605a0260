"""Explicit parsing of loosely typed form and store values.

Form inputs and store rows carry amounts as numbers, numeric strings, empty
strings or nothing at all. These helpers make the conversion rules visible:

* ``parse_amount_or_zero`` is total and never raises; anything that is not a
  finite number counts as zero. Aggregations use it.
* ``parse_optional_amount`` keeps "nothing entered" distinct from zero and is
  used when building records for persistence.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any, Optional


def _to_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.replace(",", "").strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_amount_or_zero(value: Any) -> float:
    """Return ``value`` as a finite float, or ``0.0`` when it is absent or not numeric."""
    number = _to_float(value)
    return number if number is not None else 0.0


def parse_optional_amount(value: Any) -> Optional[float]:
    """Return ``value`` as a finite float, or ``None`` when it is absent or not numeric."""
    return _to_float(value)


def parse_optional_count(value: Any) -> Optional[int]:
    number = _to_float(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def parse_show_date(value: Any) -> Optional[date]:
    """Parse a ``YYYY-MM-DD`` calendar date without any time-zone handling."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    parts = str(value).strip().split("-")
    if len(parts) != 3:
        return None
    try:
        year, month, day = (int(part) for part in parts)
    except ValueError:
        return None
    if not year or not month or not day:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None
