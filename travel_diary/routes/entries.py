"""
Travel Diary Backend — Diary Entry Route Handlers
==================================================

What:  GET /entries (list) and POST /diaryentries (create).
Who:   Diary clients listing and writing travel entries.

Note the asymmetric paths: entries are read from /entries but created at
/diaryentries. Existing clients depend on both.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from travel_diary.database import get_db_session
from travel_diary.schemas.common import ErrorResponse
from travel_diary.schemas.entry import EntryCreate, EntryResponse
from travel_diary.services.entry_service import entry_service

router = APIRouter(tags=["Entries"])


@router.get(
    "/entries",
    response_model=List[EntryResponse],
    responses={500: {"description": "Storage error", "model": ErrorResponse}},
    summary="List all diary entries",
)
async def list_entries(db: AsyncSession = Depends(get_db_session)) -> List[EntryResponse]:
    return await entry_service.list_entries(db)


@router.post(
    "/diaryentries",
    response_model=EntryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Rejected by storage", "model": ErrorResponse},
        404: {"description": "Author or location not found", "model": ErrorResponse},
    },
    summary="Create a diary entry",
    description=(
        "Creates an entry after confirming that `author_id` names an existing user "
        "and `location_id` an existing location. A missing reference of either kind "
        "returns 404 with the message 'Author or location not found'."
    ),
)
async def create_entry(
    payload: EntryCreate,
    db: AsyncSession = Depends(get_db_session),
) -> EntryResponse:
    return await entry_service.create_entry(db, payload)
