"""
TourGuide Backend — Tour Service
==================================

What:  CRUD for tours plus the two cross-entity rules that involve them.
Who:   Called by the tours and users routers and by the dev-data seeder.

Cross-entity rules:
    1. A supplied creator id must reference an existing user (NotFound
       otherwise), both on create and on update.
    2. Deleting a tour first bulk-deletes its points, then the tour row.
       Both statements run in the request's session, so a failure in the
       second rolls back the first (see app.database.get_db_session).

Update Semantics (PUT /api/tours/{id}):
    name, location   overwritten only if present
    description      always overwritten (omitting it clears it)
    created_by_id    re-resolved only if present
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError
from app.models.tour import Tour
from app.schemas.tour import TourCreate, TourResponse, TourUpdate
from app.services.point_service import point_service
from app.services.user_service import user_service

logger = logging.getLogger(__name__)


def _to_response(tour: Tour) -> TourResponse:
    return TourResponse.model_validate(tour)


class TourService:
    """Stateless business logic for tours."""

    async def _get_tour_entity(self, db: AsyncSession, tour_id: int) -> Tour:
        tour = await db.get(Tour, tour_id)
        if tour is None:
            raise NotFoundError(resource="tour", resource_id=tour_id)
        return tour

    async def create_tour(self, db: AsyncSession, data: TourCreate) -> TourResponse:
        """
        Raises:
            NotFoundError: data.created_by_id is set but no such user exists
        """
        tour = Tour(
            name=data.name,
            location=data.location,
            description=data.description,
        )
        if data.created_by_id is not None:
            creator = await user_service.get_user_entity(db, data.created_by_id)
            tour.created_by_id = creator.id

        db.add(tour)
        await db.flush()
        logger.info("Tour created: id=%s name=%r creator=%s", tour.id, tour.name, tour.created_by_id)
        return _to_response(tour)

    async def get_tour_by_id(self, db: AsyncSession, tour_id: int) -> TourResponse:
        return _to_response(await self._get_tour_entity(db, tour_id))

    async def get_all_tours(self, db: AsyncSession) -> List[TourResponse]:
        result = await db.execute(select(Tour).order_by(Tour.id.asc()))
        return [_to_response(t) for t in result.scalars().all()]

    async def get_tours_by_user(self, db: AsyncSession, user_id: int) -> List[TourResponse]:
        """Tours created by a user. Raises NotFoundError for an unknown user."""
        await user_service.get_user_entity(db, user_id)
        result = await db.execute(
            select(Tour).where(Tour.created_by_id == user_id).order_by(Tour.id.asc())
        )
        return [_to_response(t) for t in result.scalars().all()]

    async def update_tour(self, db: AsyncSession, tour_id: int, data: TourUpdate) -> TourResponse:
        """
        Partially update a tour (see module docstring for field rules).

        Raises:
            NotFoundError: the tour, or the newly supplied creator, does not exist
        """
        tour = await self._get_tour_entity(db, tour_id)

        if data.name is not None:
            tour.name = data.name
        if data.location is not None:
            tour.location = data.location

        tour.description = data.description

        if data.created_by_id is not None:
            creator = await user_service.get_user_entity(db, data.created_by_id)
            tour.created_by_id = creator.id

        await db.flush()
        logger.info("Tour updated: id=%s", tour.id)
        return _to_response(tour)

    async def delete_tour(self, db: AsyncSession, tour_id: int) -> None:
        """
        Delete a tour and all of its points.

        Raises:
            NotFoundError: no tour with this id
        """
        tour = await self._get_tour_entity(db, tour_id)
        removed = await point_service.delete_points_by_tour_id(db, tour_id)
        await db.delete(tour)
        await db.flush()
        logger.info("Tour deleted: id=%s (cascaded %d point(s))", tour_id, removed)


# ── Singleton Instance ────────────────────────────────────────────────────
tour_service = TourService()
