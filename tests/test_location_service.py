"""
Travel Diary Backend — Location Service Unit Tests
===================================================
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.exc import IntegrityError, OperationalError

from travel_diary.exceptions import ConstraintViolationError, StorageFailureError
from travel_diary.schemas.location import LocationCreate
from travel_diary.services.location_service import LocationService


class TestLocationService:

    def setup_method(self):
        self.service = LocationService()

    @pytest.mark.asyncio
    async def test_list_locations(self, mock_db_session):
        row = MagicMock()
        row.id = 1
        row.name = "Paris"
        row.latitude = 48.8566
        row.longitude = 2.3522
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = [row]
        mock_db_session.execute.return_value = mock_result

        result = await self.service.list_locations(mock_db_session)

        assert len(result) == 1
        assert result[0].latitude == 48.8566

    @pytest.mark.asyncio
    async def test_list_locations_storage_failure(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("no such table: locations"))
        )

        with pytest.raises(StorageFailureError, match="no such table"):
            await self.service.list_locations(mock_db_session)

    @pytest.mark.asyncio
    async def test_create_location_keeps_coordinates(self, mock_db_session):
        mock_db_session.add.side_effect = lambda obj: setattr(obj, "id", 1)

        result = await self.service.create_location(
            mock_db_session,
            LocationCreate(name="Paris", latitude=48.8566, longitude=2.3522),
        )

        assert result.model_dump() == {
            "id": 1,
            "name": "Paris",
            "latitude": 48.8566,
            "longitude": 2.3522,
        }

    @pytest.mark.asyncio
    async def test_create_location_missing_latitude(self, mock_db_session):
        mock_db_session.flush = AsyncMock(
            side_effect=IntegrityError(
                "INSERT", {}, Exception("NOT NULL constraint failed: locations.latitude")
            )
        )

        with pytest.raises(ConstraintViolationError) as excinfo:
            await self.service.create_location(
                mock_db_session, LocationCreate(name="Paris", longitude=2.3522)
            )

        assert excinfo.value.status_code == 400
        mock_db_session.rollback.assert_awaited_once()
