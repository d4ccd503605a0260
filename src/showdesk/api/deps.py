"""Request-scoped dependencies shared by the route modules."""

from __future__ import annotations

import logging
from typing import Callable

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..auth.context import RequestContext
from ..db.supabase import get_supabase_client, get_user_client
from ..persistence.shows import ShowRepository, load_profile
from ..schemas.distance import DistanceRequest
from ..services.distance import DistanceResult, normalize_distance
from ..services.places import PlacesClient, PlacesReadiness

bearer_scheme = HTTPBearer(auto_error=False)


def get_request_context(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> RequestContext:
    """Resolve the caller's session and profile once per request."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not signed in.")

    supabase = get_supabase_client()
    if not supabase:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Supabase not configured. Set SHOWDESK_SUPABASE_URL and SHOWDESK_SUPABASE_KEY.",
        )

    access_token = credentials.credentials
    try:
        user_response = supabase.auth.get_user(access_token)
    except Exception as exc:
        logging.warning(f"Rejected session token: {exc}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Session is invalid or expired."
        ) from exc

    user = getattr(user_response, "user", None)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Session is invalid or expired.")

    try:
        profile = load_profile(get_user_client(access_token), str(user.id))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=f"Unknown role: {exc}") from exc
    if profile is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="No profile exists for this user.")

    return RequestContext(user_id=str(user.id), access_token=access_token, profile=profile)


def get_show_repository(context: RequestContext = Depends(get_request_context)) -> ShowRepository:
    client = get_user_client(context.access_token)
    if client is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Supabase not configured.")
    return ShowRepository(client)


def get_distance_normalizer() -> Callable[[DistanceRequest], DistanceResult]:
    return normalize_distance


def get_places_readiness(request: Request) -> PlacesReadiness:
    return request.app.state.places_readiness


def get_places_client_factory() -> Callable[[], PlacesClient]:
    return PlacesClient
