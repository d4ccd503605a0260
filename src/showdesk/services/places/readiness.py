"""One-shot readiness signal for the Places integration."""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class PlacesStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"
    UNAVAILABLE = "unavailable"


class PlacesReadiness:
    """Resolves exactly once, to ``READY`` or ``UNAVAILABLE``.

    Callers block in ``wait`` for at most ``timeout`` seconds; if nothing has
    resolved the signal by then it resolves to ``UNAVAILABLE`` and stays there.
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._status = PlacesStatus.PENDING
        self._reason: Optional[str] = None

    @property
    def status(self) -> PlacesStatus:
        return self._status

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def mark_ready(self) -> PlacesStatus:
        return self._resolve(PlacesStatus.READY, None)

    def mark_unavailable(self, reason: str) -> PlacesStatus:
        return self._resolve(PlacesStatus.UNAVAILABLE, reason)

    def _resolve(self, status: PlacesStatus, reason: Optional[str]) -> PlacesStatus:
        with self._lock:
            if self._event.is_set():
                return self._status
            self._status = status
            self._reason = reason
            self._event.set()
        if status is PlacesStatus.UNAVAILABLE:
            logger.warning(f"Places autocomplete unavailable: {reason}")
        return status

    def wait(self, timeout: float) -> PlacesStatus:
        if not self._event.wait(timeout):
            return self.mark_unavailable(f"Places did not initialize within {timeout:g}s")
        return self._status


def initialize_places(readiness: PlacesReadiness, api_key: Optional[str]) -> PlacesStatus:
    if not api_key:
        return readiness.mark_unavailable("Google Maps API key is not configured.")
    return readiness.mark_ready()
