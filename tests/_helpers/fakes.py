from datetime import date
from typing import Any, Optional

from src.showdesk.auth.context import RequestContext
from src.showdesk.models.domain import Act, Profile, Role, Show, show_from_row


def make_show(sid: str, show_date: Optional[date], artist: Optional[Act] = Act.JEYF, **fields: Any) -> Show:
    fields.setdefault("event_name", f"Show {sid}")
    return Show(id=sid, show_date=show_date, artist=artist, **fields)


def make_context(role: Role, artist_scope: Optional[str] = None) -> RequestContext:
    return RequestContext(
        user_id="user-1",
        access_token="token-1",
        profile=Profile(role=role, full_name="Test User", artist_scope=artist_scope),
    )


class FakeShowRepository:
    """In-memory stand-in for ``ShowRepository``."""

    def __init__(self, shows: Optional[list[Show]] = None) -> None:
        self.shows = {show.id: show for show in shows or []}
        self.list_calls: list[bool] = []
        self.records: list[dict] = []

    def list_shows(self, include_money: bool = True) -> list[Show]:
        self.list_calls.append(include_money)
        return sorted(self.shows.values(), key=lambda show: show.show_date or date.min)

    def get_show(self, show_id: str) -> Optional[Show]:
        return self.shows.get(show_id)

    def create_show(self, record: dict) -> Show:
        self.records.append(record)
        show = show_from_row({"id": f"new-{len(self.records)}", **record})
        self.shows[show.id] = show
        return show

    def update_show(self, show_id: str, record: dict) -> Optional[Show]:
        if show_id not in self.shows:
            return None
        self.records.append(record)
        show = show_from_row({"id": show_id, **record})
        self.shows[show_id] = show
        return show

    def delete_show(self, show_id: str) -> bool:
        return self.shows.pop(show_id, None) is not None
