"""
Travel Diary Backend — Diary Entry Service
===========================================

What:  Lists `entries` rows and creates new entries after checking that the
       referenced author and location exist.
Who:   Called by GET /entries and POST /diaryentries.

Creation Flow (POST /diaryentries):
    ┌──────────────┐    ┌──────────────┐    ┌──────────────┐
    │ author exists│───▶│location exists│───▶│ INSERT entry │
    │   (users)    │    │  (locations)  │    │  + commit    │
    └──────────────┘    └──────────────┘    └──────────────┘

    Either lookup finds nothing → NotFoundError("Author or location not found").
    The client gets one message for both cases; which reference was missing
    is logged and kept in the error context.

    The lookups and the insert are separate statements. With SQLite foreign
    keys enabled, a reference that disappears between them makes the INSERT
    fail with "FOREIGN KEY constraint failed", which is reported as the same
    404. Any other storage error on this path is a ConstraintViolationError
    (400), including failures of the lookups themselves.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from travel_diary.database import storage_error_text
from travel_diary.exceptions import (
    ENTRY_REFERENCE_NOT_FOUND,
    ConstraintViolationError,
    NotFoundError,
    StorageFailureError,
)
from travel_diary.models.entry import Entry
from travel_diary.models.location import Location
from travel_diary.models.user import User
from travel_diary.schemas.entry import EntryCreate, EntryResponse

logger = logging.getLogger(__name__)


def _is_foreign_key_violation(exc: IntegrityError) -> bool:
    return "FOREIGN KEY constraint failed" in storage_error_text(exc)


class EntryService:
    """
    Business logic for diary entries.

    The only rule in the whole system lives here: an entry needs an
    existing author and an existing location.
    """

    async def list_entries(self, db: AsyncSession) -> List[EntryResponse]:
        """
        Return every entry, unfiltered, in storage order.

        Raises:
            StorageFailureError: the SELECT failed
        """
        try:
            result = await db.execute(select(Entry))
            entries = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing entries: %s", storage_error_text(e))
            raise StorageFailureError(
                message=storage_error_text(e),
                context={"operation": "list_entries"},
            )

        return [EntryResponse.model_validate(entry) for entry in entries]

    async def create_entry(self, db: AsyncSession, payload: EntryCreate) -> EntryResponse:
        """
        Check both references, then insert the entry.

        Args:
            db: Async database session (injected by FastAPI)
            payload: title, content, author_id, location_id from the body

        Returns:
            EntryResponse with the storage-assigned id

        Raises:
            NotFoundError: author or location does not exist (→ 404)
            ConstraintViolationError: lookup or insert failed in storage (→ 400)
        """
        # ── Step 1: Existence checks ──────────────────────────────────────
        try:
            author = await db.execute(select(User.id).where(User.id == payload.author_id))
            author_found = author.scalar_one_or_none() is not None

            location = await db.execute(
                select(Location.id).where(Location.id == payload.location_id)
            )
            location_found = location.scalar_one_or_none() is not None
        except SQLAlchemyError as e:
            logger.warning("Entry reference lookup failed: %s", storage_error_text(e))
            raise ConstraintViolationError(
                message=storage_error_text(e),
                context={"operation": "create_entry", "step": "lookup"},
            )

        if not (author_found and location_found):
            missing = []
            if not author_found:
                missing.append(f"author_id={payload.author_id}")
            if not location_found:
                missing.append(f"location_id={payload.location_id}")
            logger.info("Entry rejected, missing reference: %s", ", ".join(missing))
            raise NotFoundError(
                message=ENTRY_REFERENCE_NOT_FOUND,
                resource="entry reference",
                context={"missing": missing},
            )

        # ── Step 2: Insert ────────────────────────────────────────────────
        entry = Entry(
            title=payload.title,
            content=payload.content,
            author_id=payload.author_id,
            location_id=payload.location_id,
        )
        try:
            db.add(entry)
            await db.flush()
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            if _is_foreign_key_violation(e):
                logger.info("Entry rejected by foreign key check after lookup")
                raise NotFoundError(
                    message=ENTRY_REFERENCE_NOT_FOUND,
                    resource="entry reference",
                    context={"step": "insert"},
                )
            logger.warning("Entry insert rejected: %s", storage_error_text(e))
            raise ConstraintViolationError(
                message=storage_error_text(e),
                context={"operation": "create_entry", "step": "insert"},
            )
        except SQLAlchemyError as e:
            await db.rollback()
            logger.warning("Entry insert failed: %s", storage_error_text(e))
            raise ConstraintViolationError(
                message=storage_error_text(e),
                context={"operation": "create_entry", "step": "insert"},
            )

        logger.info(
            "Entry %d created (author=%s, location=%s)",
            entry.id, entry.author_id, entry.location_id,
        )
        return EntryResponse(
            id=entry.id,
            title=entry.title,
            content=entry.content,
            author_id=entry.author_id,
            location_id=entry.location_id,
        )


entry_service = EntryService()
