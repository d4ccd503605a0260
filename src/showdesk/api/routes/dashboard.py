"""Dashboard endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...auth.context import RequestContext
from ...config import settings
from ...persistence.shows import ShowRepository
from ...schemas.shows import DashboardResponse, ProfileModel, ShowMetricsModel
from ...services.metrics import build_dashboard
from ..deps import get_request_context, get_show_repository
from .shows import to_show_model

router = APIRouter(tags=["dashboard"])


def profile_model(context: RequestContext) -> ProfileModel:
    return ProfileModel(
        role=context.role.value,
        full_name=context.profile.full_name,
        artist_scope=context.profile.artist_scope,
        act_scope=context.act_scope,
        act_label=context.act_scope.label if context.act_scope else None,
        capabilities=context.capabilities(),
    )


@router.get("/dashboard", response_model=DashboardResponse, status_code=status.HTTP_200_OK)
def get_dashboard(
    context: RequestContext = Depends(get_request_context),
    repository: ShowRepository = Depends(get_show_repository),
) -> DashboardResponse:
    include_money = context.can_see_money
    shows = repository.list_shows(include_money=include_money)
    summary = build_dashboard(shows, limit=settings.upcoming_preview_limit)

    return DashboardResponse(
        profile=profile_model(context),
        all=ShowMetricsModel(**summary["all"]),
        byAct={act: ShowMetricsModel(**metrics) for act, metrics in summary["byAct"].items()},
        upcomingShows=[to_show_model(show, include_money) for show in summary["upcomingShows"]],
        moneyVisible=include_money,
    )
