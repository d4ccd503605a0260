"""Session context and role capabilities."""

from .context import RequestContext, profile_from_row

__all__ = ["RequestContext", "profile_from_row"]
