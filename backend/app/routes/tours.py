"""
TourGuide Backend — Tour Route Handlers
=========================================

What:  CRUD endpoints for tours under /api/tours.
Why:   Tours are the top-level resource the frontend lists and edits.

Status codes:
    GET     200 / 404
    POST    201 / 400 (blank name or location) / 404 (unknown createdById)
    PUT     200 / 404
    DELETE  204 / 404 — also removes every point of the tour
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.tour import TourCreate, TourResponse, TourUpdate
from app.services.tour_service import tour_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tours", tags=["Tours"])


@router.get(
    "",
    response_model=List[TourResponse],
    summary="List all tours",
)
async def list_tours(db: AsyncSession = Depends(get_db_session)) -> List[TourResponse]:
    return await tour_service.get_all_tours(db)


@router.get(
    "/{tour_id}",
    response_model=TourResponse,
    responses={404: {"description": "Tour not found", "model": ErrorResponse}},
    summary="Get a tour by ID",
)
async def get_tour(
    tour_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> TourResponse:
    return await tour_service.get_tour_by_id(db, tour_id)


@router.post(
    "",
    status_code=201,
    response_model=TourResponse,
    responses={
        201: {"description": "Tour created", "model": TourResponse},
        400: {"description": "Invalid tour data", "model": ErrorResponse},
        404: {"description": "Creator not found", "model": ErrorResponse},
    },
    summary="Create a tour",
)
async def create_tour(
    body: TourCreate,
    db: AsyncSession = Depends(get_db_session),
) -> TourResponse:
    return await tour_service.create_tour(db, body)


@router.put(
    "/{tour_id}",
    response_model=TourResponse,
    responses={404: {"description": "Tour or creator not found", "model": ErrorResponse}},
    summary="Update a tour",
    description=(
        "name and location are kept when omitted; description is cleared when omitted; "
        "createdById re-assigns the creator when given."
    ),
)
async def update_tour(
    tour_id: int,
    body: TourUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> TourResponse:
    return await tour_service.update_tour(db, tour_id, body)


@router.delete(
    "/{tour_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Tour not found", "model": ErrorResponse}},
    summary="Delete a tour and all of its points",
)
async def delete_tour(
    tour_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await tour_service.delete_tour(db, tour_id)
    return Response(status_code=204)
