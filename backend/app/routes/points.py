"""
TourGuide Backend — Point of Interest Route Handlers
======================================================

What:  CRUD for points. Listing and creation are nested under a tour
       (/api/tours/{tour_id}/points); single-point operations are addressed
       directly (/api/points/{point_id}).

Creation takes the tour from the path: any tourId in the body is replaced,
so a client cannot create a point under a different tour than the URL says.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.point import PointCreate, PointResponse, PointUpdate
from app.services.point_service import point_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Points of Interest"])


@router.get(
    "/tours/{tour_id}/points",
    response_model=List[PointResponse],
    summary="List the points of a tour in display order",
)
async def list_points(
    tour_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[PointResponse]:
    return await point_service.get_points_by_tour_id(db, tour_id)


@router.post(
    "/tours/{tour_id}/points",
    status_code=201,
    response_model=PointResponse,
    responses={
        201: {"description": "Point created", "model": PointResponse},
        400: {"description": "Invalid point data", "model": ErrorResponse},
        404: {"description": "Tour not found", "model": ErrorResponse},
    },
    summary="Add a point to a tour",
)
async def create_point(
    tour_id: int,
    body: PointCreate,
    db: AsyncSession = Depends(get_db_session),
) -> PointResponse:
    body = body.model_copy(update={"tour_id": tour_id})
    return await point_service.create_point(db, body)


@router.get(
    "/points/{point_id}",
    response_model=PointResponse,
    responses={404: {"description": "Point not found", "model": ErrorResponse}},
    summary="Get a point by ID",
)
async def get_point(
    point_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> PointResponse:
    return await point_service.get_point_by_id(db, point_id)


@router.put(
    "/points/{point_id}",
    response_model=PointResponse,
    responses={404: {"description": "Point or target tour not found", "model": ErrorResponse}},
    summary="Update a point",
    description=(
        "tourId, name, latitude and longitude are kept when omitted; description, "
        "media filenames and order are cleared when omitted."
    ),
)
async def update_point(
    point_id: int,
    body: PointUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> PointResponse:
    return await point_service.update_point(db, point_id, body)


@router.delete(
    "/points/{point_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Point not found", "model": ErrorResponse}},
    summary="Delete a point",
)
async def delete_point(
    point_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await point_service.delete_point(db, point_id)
    return Response(status_code=204)
