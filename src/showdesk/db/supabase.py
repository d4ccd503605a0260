"""Supabase clients for the Python backend."""

import logging
from functools import lru_cache
from supabase import create_client, Client
from ..config import settings


@lru_cache()
def get_supabase_client() -> Client | None:
    """Get cached Supabase client instance.

    Returns:
        Supabase Client instance if configured, None otherwise.
        Note: This does not test the connection - actual queries may fail with network errors.
    """
    if not settings.supabase_url or not settings.supabase_key:
        logging.warning("Supabase credentials not configured (missing URL or key)")
        return None

    try:
        client = create_client(settings.supabase_url, settings.supabase_key)
        return client
    except Exception as e:
        logging.error(f"Failed to create Supabase client: {e}")
        return None


def new_supabase_client() -> Client | None:
    """Uncached client, for flows that keep auth state on the client (sign-in, user JWT)."""
    if not settings.supabase_url or not settings.supabase_key:
        logging.warning("Supabase credentials not configured (missing URL or key)")
        return None
    return create_client(settings.supabase_url, settings.supabase_key)


def get_user_client(access_token: str) -> Client | None:
    """Create a client whose table queries run as the signed-in user.

    Row-level security in the database decides which shows and profiles the
    caller can read or write; the backend never filters rows on its own.
    """
    client = new_supabase_client()
    if client is None:
        return None
    client.postgrest.auth(access_token)
    return client
