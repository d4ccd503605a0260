"""Per-request session context and role capabilities.

The role checks here only decide what the API offers a caller. Which rows a
caller may actually read or write is enforced by row-level security in
Supabase.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..models.domain import Act, Profile, Role

CREATE_ROLES = frozenset({Role.ADMIN})
EDIT_ROLES = frozenset({Role.ADMIN, Role.STAFF})
MONEY_ROLES = frozenset({Role.ADMIN, Role.ARTIST})


@dataclass(slots=True, frozen=True)
class RequestContext:
    user_id: str
    access_token: str
    profile: Profile

    @property
    def role(self) -> Role:
        return self.profile.role

    @property
    def can_create_shows(self) -> bool:
        return self.role in CREATE_ROLES

    @property
    def can_edit_shows(self) -> bool:
        return self.role in EDIT_ROLES

    @property
    def can_delete_shows(self) -> bool:
        return self.role in EDIT_ROLES

    @property
    def can_see_money(self) -> bool:
        return self.role in MONEY_ROLES

    @property
    def act_scope(self) -> Optional[Act]:
        if self.role is not Role.ARTIST or not self.profile.artist_scope:
            return None
        return Act.parse(self.profile.artist_scope)

    def capabilities(self) -> dict[str, bool]:
        return {
            "create_shows": self.can_create_shows,
            "edit_shows": self.can_edit_shows,
            "delete_shows": self.can_delete_shows,
            "see_money": self.can_see_money,
        }


def profile_from_row(row: Mapping[str, Any]) -> Profile:
    """Build a ``Profile``; an unknown role raises ``ValueError``."""
    return Profile(
        role=Role(str(row.get("role", "")).strip().lower()),
        full_name=row.get("full_name"),
        artist_scope=row.get("artist_scope"),
    )
