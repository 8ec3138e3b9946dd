"""
TourGuide Backend — Dev Data Seeder Tests
===========================================

What we test:
    ✅ First run inserts the demo user, tour and three ordered points
    ✅ Second run is a no-op
"""

import pytest

from app.seed import DEMO_USERNAME, seed_dev_data
from app.services.point_service import point_service
from app.services.tour_service import tour_service
from app.services.user_service import user_service


@pytest.mark.asyncio
async def test_seed_inserts_demo_data(db_session):
    assert await seed_dev_data(db_session) is True

    assert await user_service.exists_by_username(db_session, DEMO_USERNAME)
    tours = await tour_service.get_all_tours(db_session)
    assert len(tours) == 1
    points = await point_service.get_points_by_tour_id(db_session, tours[0].id)
    assert [p.order for p in points] == [1, 2, 3]


@pytest.mark.asyncio
async def test_seed_is_idempotent(db_session):
    await seed_dev_data(db_session)

    assert await seed_dev_data(db_session) is False
    assert len(await tour_service.get_all_tours(db_session)) == 1
