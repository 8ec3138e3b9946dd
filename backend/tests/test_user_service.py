"""
TourGuide Backend — User Service Unit Tests
=============================================

What:  Tests for registration, lookup and password hashing.
How:   Mock sessions for the error-translation paths, a throwaway SQLite
       database for the behaviour that depends on real constraints.

What we test:
    ✅ Registration stores a bcrypt hash, never the plaintext
    ✅ Hashing runs off the event loop (other tasks keep being scheduled)
    ✅ Duplicate username raises ConflictError (pre-check and constraint race)
    ✅ Unexpected database errors become DatabaseError
    ✅ Lookup of a missing user raises NotFoundError
"""

import asyncio
import time

import bcrypt
import pytest
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import IntegrityError, OperationalError

from app.exceptions import ConflictError, DatabaseError, NotFoundError
from app.models.user import User
from app.security import hash_password
from app.services.user_service import UserService


class TestPasswordHashing:

    def test_hash_is_not_plaintext(self):
        hashed = hash_password("secret")
        assert hashed != "secret"
        assert hashed.startswith("$2")

    def test_hash_checks_against_plaintext(self):
        hashed = hash_password("secret").encode("utf-8")
        assert bcrypt.checkpw(b"secret", hashed)
        assert not bcrypt.checkpw(b"wrong", hashed)

    def test_same_password_gets_fresh_salt(self):
        assert hash_password("secret") != hash_password("secret")


class TestUserServiceWithMocks:
    """Error translation, no database involved."""

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_precheck_conflict(self, mock_db_session):
        result = MagicMock()
        result.scalar.return_value = True
        mock_db_session.execute.return_value = result

        with pytest.raises(ConflictError):
            await self.service.create_user(mock_db_session, "alice", "pw")

        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_constraint_race_becomes_conflict(self, mock_db_session):
        result = MagicMock()
        result.scalar.return_value = False
        mock_db_session.execute.return_value = result
        mock_db_session.flush = AsyncMock(
            side_effect=IntegrityError("INSERT INTO users", {}, Exception("UNIQUE constraint failed"))
        )

        with pytest.raises(ConflictError):
            await self.service.create_user(mock_db_session, "alice", "pw")

    @pytest.mark.asyncio
    async def test_other_database_error(self, mock_db_session):
        result = MagicMock()
        result.scalar.return_value = False
        mock_db_session.execute.return_value = result
        mock_db_session.flush = AsyncMock(
            side_effect=OperationalError("INSERT INTO users", {}, Exception("database is locked"))
        )

        with pytest.raises(DatabaseError):
            await self.service.create_user(mock_db_session, "alice", "pw")

    @pytest.mark.asyncio
    async def test_get_missing_user(self, mock_db_session):
        mock_db_session.get.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get_user_by_id(mock_db_session, 42)

        assert "42" in exc_info.value.message


class TestUserServiceWithDatabase:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_create_and_fetch(self, db_session):
        created = await self.service.create_user(db_session, "alice", "s3cret")

        assert created.id is not None
        assert created.username == "alice"

        fetched = await self.service.get_user_by_id(db_session, created.id)
        assert fetched == created

    @pytest.mark.asyncio
    async def test_stored_password_is_hashed(self, db_session):
        created = await self.service.create_user(db_session, "bob", "hunter2")

        entity = await db_session.get(User, created.id)
        assert entity.password != "hunter2"
        assert bcrypt.checkpw(b"hunter2", entity.password.encode("utf-8"))

    @pytest.mark.asyncio
    async def test_duplicate_username(self, db_session):
        await self.service.create_user(db_session, "carol", "pw1")

        with pytest.raises(ConflictError):
            await self.service.create_user(db_session, "carol", "pw2")

    @pytest.mark.asyncio
    async def test_exists_by_username(self, db_session):
        assert await self.service.exists_by_username(db_session, "dave") is False
        await self.service.create_user(db_session, "dave", "pw")
        assert await self.service.exists_by_username(db_session, "dave") is True

    @pytest.mark.asyncio
    async def test_hashing_keeps_event_loop_responsive(self, db_session):
        """Other coroutines keep running while a registration hashes its password."""
        gaps = []
        done = asyncio.Event()

        async def ticker():
            last = time.perf_counter()
            while not done.is_set():
                await asyncio.sleep(0.005)
                now = time.perf_counter()
                gaps.append(now - last)
                last = now

        task = asyncio.create_task(ticker())
        try:
            await self.service.create_user(db_session, "erin", "secret")
        finally:
            done.set()
            await task

        # cost-12 bcrypt takes a few hundred ms; on the loop it would show up as one gap
        assert gaps
        assert max(gaps) < 0.15
