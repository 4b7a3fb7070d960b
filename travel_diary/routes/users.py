"""
Travel Diary Backend — User Route Handlers
===========================================

What:  GET /users, GET /users/{user_id}, POST /users.
       The path id is handed to storage as text: SQLite matches "7" to the
       integer 7, and an id that is not a number matches no row (404).
How:   Extract path/body, delegate to UserService, return the schema.
       Errors are raised by the service and mapped to responses by the
       handlers registered in `travel_diary.main`.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from travel_diary.database import get_db_session
from travel_diary.schemas.common import ErrorResponse
from travel_diary.schemas.user import UserCreate, UserResponse
from travel_diary.services.user_service import user_service

router = APIRouter(tags=["Users"])


@router.get(
    "/users",
    response_model=List[UserResponse],
    responses={500: {"description": "Storage error", "model": ErrorResponse}},
    summary="List all users",
)
async def list_users(db: AsyncSession = Depends(get_db_session)) -> List[UserResponse]:
    return await user_service.list_users(db)


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={
        404: {"description": "User not found", "model": ErrorResponse},
        500: {"description": "Storage error", "model": ErrorResponse},
    },
    summary="Get a single user by id",
)
async def get_user(user_id: str, db: AsyncSession = Depends(get_db_session)) -> UserResponse:
    return await user_service.get_user(db, user_id)


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Rejected by storage", "model": ErrorResponse}},
    summary="Create a user",
)
async def create_user(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    return await user_service.create_user(db, payload)
