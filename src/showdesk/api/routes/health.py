"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root(request: Request) -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    readiness = getattr(request.app.state, "places_readiness", None)
    return {
        "status": "ok",
        "places": readiness.status.value if readiness else None,
    }


@router.get("/health/database", status_code=status.HTTP_200_OK)
def check_database() -> dict:
    """Check database configuration and connectivity."""
    from ...db.supabase import get_supabase_client

    supabase = get_supabase_client()
    if not supabase:
        return {
            "configured": False,
            "message": "Supabase not configured. Set SHOWDESK_SUPABASE_URL and SHOWDESK_SUPABASE_KEY environment variables.",
        }

    try:
        # Anonymous callers see only what row-level security allows, possibly nothing.
        supabase.table("shows_public").select("id", count="exact").limit(1).execute()
        return {"configured": True, "connected": True, "message": "Database connected."}
    except Exception as exc:
        return {
            "configured": True,
            "connected": False,
            "error": str(exc),
            "message": f"Database connection error: {exc}",
        }
