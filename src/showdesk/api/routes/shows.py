"""Show CRUD endpoints."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Callable, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ...auth.context import RequestContext
from ...models.domain import Act, Show
from ...persistence.shows import ShowRepository
from ...schemas.distance import DistanceRequest
from ...schemas.shows import ListTotalsModel, ShowListResponse, ShowModel, ShowWrite
from ...services.booking import prepare_show_record
from ...services.distance import DistanceResult
from ...services.metrics import compute_list_totals, filter_shows
from ..deps import get_distance_normalizer, get_request_context, get_show_repository

router = APIRouter(prefix="/shows", tags=["shows"])


def to_show_model(show: Show, include_money: bool = True) -> ShowModel:
    data = asdict(show)
    if not include_money:
        for field in ("show_cost", "advance_paid", "viaticos_cobrados"):
            data[field] = None
    return ShowModel(**data)


@router.get("", response_model=ShowListResponse, status_code=status.HTTP_200_OK)
def list_shows(
    artist: Literal["ALL", "JEYF", "ELGUDI"] = Query(default="ALL", description="Act tab"),
    q: str = Query(default="", description="Search over event, venue and address"),
    month: str = Query(default="", pattern=r"^(\d{4}-\d{2})?$", description="YYYY-MM"),
    context: RequestContext = Depends(get_request_context),
    repository: ShowRepository = Depends(get_show_repository),
) -> ShowListResponse:
    include_money = context.can_see_money
    shows = repository.list_shows(include_money=include_money)
    act = None if artist == "ALL" else Act(artist)
    filtered = filter_shows(shows, act=act, query=q, month=month)

    totals = ListTotalsModel(**compute_list_totals(filtered)) if include_money else None
    return ShowListResponse(
        items=[to_show_model(show, include_money) for show in filtered],
        count=len(filtered),
        totals=totals,
    )


@router.get("/{show_id}", response_model=ShowModel, status_code=status.HTTP_200_OK)
def get_show(
    show_id: str,
    context: RequestContext = Depends(get_request_context),
    repository: ShowRepository = Depends(get_show_repository),
) -> ShowModel:
    show = repository.get_show(show_id)
    if show is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Show {show_id} not found")
    return to_show_model(show, context.can_see_money)


@router.post("", response_model=ShowModel, status_code=status.HTTP_201_CREATED)
def create_show(
    payload: ShowWrite,
    resolve_distance: bool = Query(default=False, description="Look up km from the location when empty"),
    context: RequestContext = Depends(get_request_context),
    repository: ShowRepository = Depends(get_show_repository),
    normalizer: Callable[[DistanceRequest], DistanceResult] = Depends(get_distance_normalizer),
) -> ShowModel:
    if not context.can_create_shows:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only admins can create shows.")

    record = prepare_show_record(payload, resolve_distance=resolve_distance, normalizer=normalizer)
    try:
        show = repository.create_show(record)
    except Exception as exc:
        logging.exception(f"Error creating show: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create show: {str(exc)}",
        ) from exc
    return to_show_model(show)


@router.put("/{show_id}", response_model=ShowModel, status_code=status.HTTP_200_OK)
def update_show(
    show_id: str,
    payload: ShowWrite,
    resolve_distance: bool = Query(default=False, description="Look up km from the location when empty"),
    context: RequestContext = Depends(get_request_context),
    repository: ShowRepository = Depends(get_show_repository),
    normalizer: Callable[[DistanceRequest], DistanceResult] = Depends(get_distance_normalizer),
) -> ShowModel:
    if not context.can_edit_shows:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only admins and staff can edit shows.")

    record = prepare_show_record(payload, resolve_distance=resolve_distance, normalizer=normalizer)
    try:
        show = repository.update_show(show_id, record)
    except Exception as exc:
        logging.exception(f"Error updating show {show_id}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update show: {str(exc)}",
        ) from exc
    if show is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Show {show_id} not found")
    return to_show_model(show, context.can_see_money)


@router.delete("/{show_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_show(
    show_id: str,
    context: RequestContext = Depends(get_request_context),
    repository: ShowRepository = Depends(get_show_repository),
) -> Response:
    if not context.can_delete_shows:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only admins and staff can delete shows.")

    if not repository.delete_show(show_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Show {show_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
