"""
TourGuide Backend — User Route Handlers
=========================================

What:  Registration and lookup of users, plus the tours a user created.
How:   Thin handlers; UserService and TourService do the work.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.tour import TourResponse
from app.schemas.user import UserCreate, UserResponse
from app.services.tour_service import tour_service
from app.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post(
    "/register",
    status_code=201,
    response_model=UserResponse,
    responses={
        201: {"description": "User registered", "model": UserResponse},
        400: {"description": "Missing or blank username/password", "model": ErrorResponse},
        409: {"description": "Username already taken", "model": ErrorResponse},
    },
    summary="Register a new user",
)
async def register_user(
    body: UserCreate,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    """
    Create a user with a bcrypt-hashed password.

    The response never contains the password or its hash.
    """
    return await user_service.create_user(db, body.username, body.password)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"description": "User not found", "model": ErrorResponse}},
    summary="Get a user by ID",
)
async def get_user(
    user_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    return await user_service.get_user_by_id(db, user_id)


@router.get(
    "/{user_id}/tours",
    response_model=List[TourResponse],
    responses={404: {"description": "User not found", "model": ErrorResponse}},
    summary="List tours created by a user",
)
async def get_user_tours(
    user_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[TourResponse]:
    return await tour_service.get_tours_by_user(db, user_id)
