"""
TourGuide Backend — User Service
==================================

What:  Registration and lookup of users.
Who:   Called by the users router, by TourService (creator resolution) and
       by the dev-data seeder.

Hashing:
    bcrypt runs in the default thread pool executor, so a registration does
    not hold up other requests on the event loop.

Uniqueness:
    `exists_by_username` gives a fast, friendly Conflict for the common
    case. It is not atomic with the insert, so two concurrent registrations
    can both pass it; the UNIQUE constraint on users.username then rejects
    the second insert and the IntegrityError is translated into the same
    ConflictError.
"""

import asyncio
import logging

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError, DatabaseError, NotFoundError
from app.models.user import User
from app.schemas.user import UserResponse
from app.security import hash_password

logger = logging.getLogger(__name__)


class UserService:
    """Stateless business logic for users; the session is passed per call."""

    async def exists_by_username(self, db: AsyncSession, username: str) -> bool:
        """Boolean presence check for a username."""
        result = await db.execute(select(exists().where(User.username == username)))
        return bool(result.scalar())

    async def create_user(self, db: AsyncSession, username: str, password: str) -> UserResponse:
        """
        Register a new user.

        Raises:
            ConflictError: username already taken (pre-check or constraint)
            DatabaseError: any other database failure
        """
        if await self.exists_by_username(db, username):
            raise ConflictError(
                message=f"User '{username}' already exists",
                context={"username": username},
            )

        # bcrypt is CPU-bound; keep it off the event loop
        loop = asyncio.get_running_loop()
        hashed = await loop.run_in_executor(None, hash_password, password)

        user = User(username=username, password=hashed)
        db.add(user)
        try:
            # Flush so the unique constraint fires here, not at commit time
            await db.flush()
        except IntegrityError as e:
            logger.info("Username race lost for '%s': %s", username, e.orig)
            raise ConflictError(
                message=f"User '{username}' already exists",
                context={"username": username},
            )
        except SQLAlchemyError as e:
            logger.error("Database error creating user '%s': %s", username, e)
            raise DatabaseError(context={"operation": "create_user"})

        logger.info("User registered: id=%s username=%s", user.id, user.username)
        return UserResponse(id=user.id, username=user.username)

    async def get_user_entity(self, db: AsyncSession, user_id: int) -> User:
        """Load the ORM entity or raise NotFoundError."""
        user = await db.get(User, user_id)
        if user is None:
            raise NotFoundError(resource="user", resource_id=user_id)
        return user

    async def get_user_by_id(self, db: AsyncSession, user_id: int) -> UserResponse:
        user = await self.get_user_entity(db, user_id)
        return UserResponse(id=user.id, username=user.username)


# ── Singleton Instance ────────────────────────────────────────────────────
user_service = UserService()
