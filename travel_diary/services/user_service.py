"""
Travel Diary Backend — User Service
====================================

What:  Reads and inserts `users` rows.
How:   Each method runs one parameterized statement through the request's
       AsyncSession and translates SQLAlchemy failures into the error
       variants of `travel_diary.exceptions`.
Who:   Called by the /users route handlers.

Error translation:
    list_users / get_user   SQLAlchemyError → StorageFailureError (500)
    get_user                no row          → NotFoundError (404)
    create_user             SQLAlchemyError → ConstraintViolationError (400)
"""

import logging
from typing import List, Union

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from travel_diary.database import storage_error_text
from travel_diary.exceptions import (
    USER_NOT_FOUND,
    ConstraintViolationError,
    NotFoundError,
    StorageFailureError,
)
from travel_diary.models.user import User
from travel_diary.schemas.user import UserCreate, UserResponse

logger = logging.getLogger(__name__)


class UserService:
    """Stateless; the session is passed in by the caller for each call."""

    async def list_users(self, db: AsyncSession) -> List[UserResponse]:
        """
        Return every user in storage order (no ORDER BY).

        Raises:
            StorageFailureError: the SELECT failed
        """
        try:
            result = await db.execute(select(User))
            users = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing users: %s", storage_error_text(e))
            raise StorageFailureError(
                message=storage_error_text(e),
                context={"operation": "list_users"},
            )

        return [UserResponse.model_validate(user) for user in users]

    async def get_user(self, db: AsyncSession, user_id: Union[int, str]) -> UserResponse:
        """
        Retrieve a single user by id.

        `user_id` may be the raw path segment; a value that is not an
        integer simply matches nothing.

        Raises:
            NotFoundError: no row with this id (→ 404 "User not found")
            StorageFailureError: the SELECT failed
        """
        try:
            result = await db.execute(select(User).where(User.id == user_id))
            user = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching user %s: %s", user_id, storage_error_text(e))
            raise StorageFailureError(
                message=storage_error_text(e),
                context={"operation": "get_user", "user_id": user_id},
            )

        if user is None:
            raise NotFoundError(message=USER_NOT_FOUND, resource="user", resource_id=user_id)

        return UserResponse.model_validate(user)

    async def create_user(self, db: AsyncSession, payload: UserCreate) -> UserResponse:
        """
        Insert a user and return it with the storage-assigned id.

        Fields are passed through as given; NULLs are rejected by the
        NOT NULL constraints, not here.

        Raises:
            ConstraintViolationError: the INSERT was rejected
        """
        user = User(username=payload.username, email=payload.email)
        try:
            db.add(user)
            await db.flush()
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.warning("User insert rejected: %s", storage_error_text(e))
            raise ConstraintViolationError(
                message=storage_error_text(e),
                context={"operation": "create_user"},
            )

        logger.info("User %d created", user.id)
        return UserResponse(id=user.id, username=user.username, email=user.email)


user_service = UserService()
