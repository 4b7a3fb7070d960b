"""
Travel Diary Backend — Location Service
========================================

What:  Reads and inserts `locations` rows. Same error translation as
       UserService: read failures → StorageFailureError, rejected
       inserts → ConstraintViolationError.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from travel_diary.database import storage_error_text
from travel_diary.exceptions import ConstraintViolationError, StorageFailureError
from travel_diary.models.location import Location
from travel_diary.schemas.location import LocationCreate, LocationResponse

logger = logging.getLogger(__name__)


class LocationService:
    """Stateless; the session is passed in by the caller for each call."""

    async def list_locations(self, db: AsyncSession) -> List[LocationResponse]:
        """
        Return every location in storage order.

        Raises:
            StorageFailureError: the SELECT failed
        """
        try:
            result = await db.execute(select(Location))
            locations = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing locations: %s", storage_error_text(e))
            raise StorageFailureError(
                message=storage_error_text(e),
                context={"operation": "list_locations"},
            )

        return [LocationResponse.model_validate(location) for location in locations]

    async def create_location(
        self, db: AsyncSession, payload: LocationCreate
    ) -> LocationResponse:
        """
        Insert a location and return it with the storage-assigned id.

        Coordinates are stored as given; the REAL columns keep full
        double precision.

        Raises:
            ConstraintViolationError: the INSERT was rejected
        """
        location = Location(
            name=payload.name,
            latitude=payload.latitude,
            longitude=payload.longitude,
        )
        try:
            db.add(location)
            await db.flush()
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.warning("Location insert rejected: %s", storage_error_text(e))
            raise ConstraintViolationError(
                message=storage_error_text(e),
                context={"operation": "create_location"},
            )

        logger.info("Location %d created (%s)", location.id, location.name)
        return LocationResponse(
            id=location.id,
            name=location.name,
            latitude=location.latitude,
            longitude=location.longitude,
        )


location_service = LocationService()
