"""Session endpoints backed by Supabase Auth."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ...auth.context import RequestContext
from ...db.supabase import new_supabase_client
from ...schemas.auth import LoginRequest, SessionResponse
from ...schemas.shows import ProfileModel
from ..deps import get_request_context
from .dashboard import profile_model

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=SessionResponse, status_code=status.HTTP_200_OK)
def login(payload: LoginRequest) -> SessionResponse:
    supabase = new_supabase_client()
    if not supabase:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Supabase not configured.")

    try:
        auth_response = supabase.auth.sign_in_with_password(
            {"email": payload.email.strip(), "password": payload.password}
        )
    except Exception as exc:
        logging.info(f"Sign-in failed for {payload.email}: {exc}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc

    session = auth_response.session
    if session is None or auth_response.user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials.")

    return SessionResponse(
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        expires_in=session.expires_in,
        user_id=str(auth_response.user.id),
    )


@router.get("/me", response_model=ProfileModel, status_code=status.HTTP_200_OK)
def me(context: RequestContext = Depends(get_request_context)) -> ProfileModel:
    return profile_model(context)
