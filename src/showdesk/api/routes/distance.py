"""Distance endpoint."""

from __future__ import annotations

import logging
from typing import Callable

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from ...schemas.distance import DistanceRequest, DistanceResponse
from ...services.distance import DistanceError, DistanceResult, ServerError
from ..deps import get_distance_normalizer

router = APIRouter(tags=["distance"])


@router.post("/distance", response_model=DistanceResponse, status_code=status.HTTP_200_OK)
async def compute_distance(
    request: Request,
    normalizer: Callable[[DistanceRequest], DistanceResult] = Depends(get_distance_normalizer),
):
    """Driving distance in km from the home base to a place id or address."""
    try:
        body = await request.json()
        payload = DistanceRequest.model_validate(body if isinstance(body, dict) else {})
        result = await run_in_threadpool(normalizer, payload)
        return DistanceResponse(km=result.km, meters=result.meters)
    except DistanceError as exc:
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())
    except Exception as exc:
        logging.exception(f"Error computing distance: {exc}")
        error = ServerError(str(exc))
        return JSONResponse(status_code=error.status_code, content=error.to_payload())
