"""
TourGuide Backend — Point of Interest Service
===============================================

What:  CRUD for points of interest, always scoped to an existing tour.
Who:   Called by the points router and by TourService (cascade delete).

Update Semantics (PUT /api/points/{id}):
    Two deliberately separate paths, applied in _apply_update():

    overwrite-if-present   name, latitude, longitude
                           tour_id (only if it differs from the current tour)
    always-overwrite       description, photo_filename, audio_filename,
                           video_filename, order

    A client that omits `description` therefore clears it, while omitting
    `name` keeps the existing name. Clients are expected to send the full
    media state on every update.
"""

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError
from app.models.point import PointOfInterest
from app.models.tour import Tour
from app.schemas.point import PointCreate, PointResponse, PointUpdate

logger = logging.getLogger(__name__)


def _to_response(point: PointOfInterest) -> PointResponse:
    return PointResponse.model_validate(point)


class PointOfInterestService:
    """Stateless business logic for points of interest."""

    async def _require_tour(self, db: AsyncSession, tour_id: int) -> Tour:
        tour = await db.get(Tour, tour_id)
        if tour is None:
            raise NotFoundError(resource="tour", resource_id=tour_id)
        return tour

    async def _get_point_entity(self, db: AsyncSession, point_id: int) -> PointOfInterest:
        point = await db.get(PointOfInterest, point_id)
        if point is None:
            raise NotFoundError(resource="point of interest", resource_id=point_id)
        return point

    async def create_point(self, db: AsyncSession, data: PointCreate) -> PointResponse:
        """
        Create a point under its parent tour.

        Raises:
            NotFoundError: data.tour_id does not reference an existing tour
        """
        tour = await self._require_tour(db, data.tour_id)

        point = PointOfInterest(
            tour_id=tour.id,
            name=data.name,
            description=data.description,
            latitude=data.latitude,
            longitude=data.longitude,
            photo_filename=data.photo_filename,
            audio_filename=data.audio_filename,
            video_filename=data.video_filename,
            order=data.order,
        )
        db.add(point)
        await db.flush()
        logger.info("Point created: id=%s tour_id=%s order=%s", point.id, point.tour_id, point.order)
        return _to_response(point)

    async def get_point_by_id(self, db: AsyncSession, point_id: int) -> PointResponse:
        return _to_response(await self._get_point_entity(db, point_id))

    async def get_points_by_tour_id(self, db: AsyncSession, tour_id: int) -> List[PointResponse]:
        """
        All points of a tour in ascending display order.

        `order` is neither unique nor required, so id breaks ties to keep the
        listing stable. An unknown tour id simply yields an empty list.
        """
        result = await db.execute(
            select(PointOfInterest)
            .where(PointOfInterest.tour_id == tour_id)
            .order_by(PointOfInterest.order.asc(), PointOfInterest.id.asc())
        )
        return [_to_response(p) for p in result.scalars().all()]

    async def _apply_update(self, db: AsyncSession, point: PointOfInterest, data: PointUpdate) -> None:
        # ── Overwrite-if-present ──────────────────────────────────────────
        if data.tour_id is not None and data.tour_id != point.tour_id:
            tour = await self._require_tour(db, data.tour_id)
            point.tour_id = tour.id
        if data.name is not None:
            point.name = data.name
        if data.latitude is not None:
            point.latitude = data.latitude
        if data.longitude is not None:
            point.longitude = data.longitude

        # ── Always-overwrite ──────────────────────────────────────────────
        point.description = data.description
        point.photo_filename = data.photo_filename
        point.audio_filename = data.audio_filename
        point.video_filename = data.video_filename
        point.order = data.order

    async def update_point(self, db: AsyncSession, point_id: int, data: PointUpdate) -> PointResponse:
        """
        Partially update a point (see module docstring for field rules).

        Raises:
            NotFoundError: the point, or a newly requested tour, does not exist
        """
        point = await self._get_point_entity(db, point_id)
        await self._apply_update(db, point, data)
        await db.flush()
        logger.info("Point updated: id=%s", point.id)
        return _to_response(point)

    async def delete_point(self, db: AsyncSession, point_id: int) -> None:
        point = await self._get_point_entity(db, point_id)
        await db.delete(point)
        await db.flush()
        logger.info("Point deleted: id=%s", point_id)

    async def delete_points_by_tour_id(self, db: AsyncSession, tour_id: int) -> int:
        """Bulk-delete every point of a tour. Returns the number of rows removed."""
        result = await db.execute(
            delete(PointOfInterest).where(PointOfInterest.tour_id == tour_id)
        )
        removed = result.rowcount or 0
        logger.info("Deleted %d point(s) of tour %s", removed, tour_id)
        return removed


# ── Singleton Instance ────────────────────────────────────────────────────
point_service = PointOfInterestService()
