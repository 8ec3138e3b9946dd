"""
TourGuide Backend — Tour Service Unit Tests
=============================================

What:  Tests for tour CRUD, creator resolution, partial update rules and
       the cascade delete of points.

What we test:
    ✅ Creator is linked when given, left empty when omitted
    ✅ Unknown creator raises NotFoundError
    ✅ Update keeps omitted name/location but clears omitted description
    ✅ Deleting a tour removes its points
    ✅ A failure after the point cascade rolls everything back
    ✅ Tours can be listed per creator
"""

import pytest
from unittest.mock import AsyncMock, patch
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.exceptions import DatabaseError, NotFoundError
from app.schemas.point import PointCreate
from app.schemas.tour import TourCreate, TourUpdate
from app.services.point_service import point_service
from app.services.tour_service import TourService
from app.services.user_service import user_service


class TestTourServiceWithMocks:

    def setup_method(self):
        self.service = TourService()

    @pytest.mark.asyncio
    async def test_get_missing_tour(self, mock_db_session):
        mock_db_session.get.return_value = None

        with pytest.raises(NotFoundError):
            await self.service.get_tour_by_id(mock_db_session, 7)

    @pytest.mark.asyncio
    async def test_delete_missing_tour_touches_nothing(self, mock_db_session):
        mock_db_session.get.return_value = None

        with pytest.raises(NotFoundError):
            await self.service.delete_tour(mock_db_session, 7)

        mock_db_session.execute.assert_not_awaited()
        mock_db_session.delete.assert_not_awaited()


class TestTourServiceWithDatabase:

    def setup_method(self):
        self.service = TourService()

    @pytest.mark.asyncio
    async def test_create_with_creator(self, db_session):
        user = await user_service.create_user(db_session, "guide", "pw")

        tour = await self.service.create_tour(
            db_session,
            TourCreate(name="City Walk", location="Paris", created_by_id=user.id),
        )

        assert tour.id is not None
        assert tour.created_by_id == user.id

    @pytest.mark.asyncio
    async def test_create_without_creator(self, db_session):
        tour = await self.service.create_tour(
            db_session, TourCreate(name="Harbour", location="Oslo")
        )

        assert tour.created_by_id is None
        assert tour.description is None

    @pytest.mark.asyncio
    async def test_create_with_unknown_creator(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.create_tour(
                db_session,
                TourCreate(name="Ghost", location="Nowhere", created_by_id=999),
            )

    @pytest.mark.asyncio
    async def test_update_field_rules(self, db_session):
        tour = await self.service.create_tour(
            db_session,
            TourCreate(name="Old Town", location="Prague", description="Cobblestones"),
        )

        updated = await self.service.update_tour(
            db_session, tour.id, TourUpdate(location="Brno")
        )

        assert updated.name == "Old Town"
        assert updated.location == "Brno"
        assert updated.description is None

    @pytest.mark.asyncio
    async def test_update_reassigns_creator(self, db_session):
        first = await user_service.create_user(db_session, "first", "pw")
        second = await user_service.create_user(db_session, "second", "pw")
        tour = await self.service.create_tour(
            db_session, TourCreate(name="Canal", location="Venice", created_by_id=first.id)
        )

        updated = await self.service.update_tour(
            db_session, tour.id, TourUpdate(created_by_id=second.id)
        )

        assert updated.created_by_id == second.id

    @pytest.mark.asyncio
    async def test_update_with_unknown_creator(self, db_session):
        tour = await self.service.create_tour(
            db_session, TourCreate(name="Canal", location="Venice")
        )

        with pytest.raises(NotFoundError):
            await self.service.update_tour(db_session, tour.id, TourUpdate(created_by_id=999))

    @pytest.mark.asyncio
    async def test_delete_cascades_points(self, db_session):
        tour = await self.service.create_tour(
            db_session, TourCreate(name="City Walk", location="Paris")
        )
        for i in range(3):
            await point_service.create_point(
                db_session,
                PointCreate(tour_id=tour.id, name=f"Stop {i}", latitude="48.85", longitude="2.29", order=i),
            )

        await self.service.delete_tour(db_session, tour.id)

        assert await point_service.get_points_by_tour_id(db_session, tour.id) == []
        with pytest.raises(NotFoundError):
            await self.service.get_tour_by_id(db_session, tour.id)

    @pytest.mark.asyncio
    async def test_tours_by_user(self, db_session):
        owner = await user_service.create_user(db_session, "owner", "pw")
        other = await user_service.create_user(db_session, "other", "pw")
        mine = await self.service.create_tour(
            db_session, TourCreate(name="Mine", location="Rome", created_by_id=owner.id)
        )
        await self.service.create_tour(
            db_session, TourCreate(name="Theirs", location="Rome", created_by_id=other.id)
        )

        tours = await self.service.get_tours_by_user(db_session, owner.id)

        assert [t.id for t in tours] == [mine.id]

    @pytest.mark.asyncio
    async def test_tours_by_unknown_user(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.get_tours_by_user(db_session, 404)

    @pytest.mark.asyncio
    async def test_get_all_tours_ordered_by_id(self, db_session):
        a = await self.service.create_tour(db_session, TourCreate(name="A", location="X"))
        b = await self.service.create_tour(db_session, TourCreate(name="B", location="Y"))

        tours = await self.service.get_all_tours(db_session)

        assert [t.id for t in tours] == [a.id, b.id]


class TestTourDeleteAtomicity:
    """Cascade and tour-row delete share one transaction."""

    @pytest.mark.asyncio
    async def test_failed_tour_delete_rolls_back_points(self, db_engine):
        factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
        service = TourService()

        async with factory() as session:
            tour = await service.create_tour(session, TourCreate(name="City Walk", location="Paris"))
            for i in range(2):
                await point_service.create_point(
                    session,
                    PointCreate(tour_id=tour.id, name=f"Stop {i}", latitude="1", longitude="2", order=i),
                )
            await session.commit()

        async with factory() as session:
            failing_delete = AsyncMock(side_effect=DatabaseError(context={"operation": "delete_tour"}))
            with patch.object(session, "delete", failing_delete):
                with pytest.raises(DatabaseError):
                    await service.delete_tour(session, tour.id)
            # the cascade already ran inside this transaction
            assert await point_service.get_points_by_tour_id(session, tour.id) == []
            await session.rollback()

        async with factory() as session:
            points = await point_service.get_points_by_tour_id(session, tour.id)
            assert [p.name for p in points] == ["Stop 0", "Stop 1"]
            assert (await service.get_tour_by_id(session, tour.id)).name == "City Walk"
