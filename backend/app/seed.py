"""
TourGuide Backend — Development Data Seeder
=============================================

What:  Inserts a demo user, one walking tour and three ordered points.
When:  At startup when SEED_DEV_DATA=true (see app.main.lifespan).
Why:   Gives a fresh database something to render without manual setup.

Idempotent: if the demo user already exists nothing is inserted, so the
flag can stay on across restarts.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas.point import PointCreate
from app.schemas.tour import TourCreate
from app.services.point_service import point_service
from app.services.tour_service import tour_service
from app.services.user_service import user_service

logger = logging.getLogger(__name__)

DEMO_USERNAME = "user"
DEMO_PASSWORD = "password"

DEMO_POINTS = [
    ("Red Square", "The main square of Moscow", "55.7539", "37.6208"),
    ("St. Basil's Cathedral", "Orthodox church on Red Square", "55.7525", "37.6231"),
    ("GUM", "The State Department Store", "55.7546", "37.6215"),
]


async def seed_dev_data(db: AsyncSession) -> bool:
    """
    Seed demo data into the given session.

    Returns:
        True if data was inserted, False if it was already present.
    """
    if await user_service.exists_by_username(db, DEMO_USERNAME):
        logger.info("Dev data already present; skipping seed")
        return False

    user = await user_service.create_user(db, DEMO_USERNAME, DEMO_PASSWORD)
    tour = await tour_service.create_tour(
        db,
        TourCreate(
            name="Walk through central Moscow",
            location="Moscow",
            description="A stroll past the main sights of the city centre",
            created_by_id=user.id,
        ),
    )
    for position, (name, description, lat, lng) in enumerate(DEMO_POINTS, start=1):
        await point_service.create_point(
            db,
            PointCreate(
                tour_id=tour.id,
                name=name,
                description=description,
                latitude=lat,
                longitude=lng,
                order=position,
            ),
        )

    logger.info("Dev data seeded: user=%s tour=%s points=%d", user.id, tour.id, len(DEMO_POINTS))
    return True
