"""
Travel Diary Backend — Location Route Handlers
===============================================

What:  GET /locations and POST /locations. There is no per-id lookup.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from travel_diary.database import get_db_session
from travel_diary.schemas.common import ErrorResponse
from travel_diary.schemas.location import LocationCreate, LocationResponse
from travel_diary.services.location_service import location_service

router = APIRouter(tags=["Locations"])


@router.get(
    "/locations",
    response_model=List[LocationResponse],
    responses={500: {"description": "Storage error", "model": ErrorResponse}},
    summary="List all locations",
)
async def list_locations(
    db: AsyncSession = Depends(get_db_session),
) -> List[LocationResponse]:
    return await location_service.list_locations(db)


@router.post(
    "/locations",
    response_model=LocationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Rejected by storage", "model": ErrorResponse}},
    summary="Create a location",
)
async def create_location(
    payload: LocationCreate,
    db: AsyncSession = Depends(get_db_session),
) -> LocationResponse:
    return await location_service.create_location(db, payload)
