"""
Travel Diary Backend — Database Handle Tests
=============================================

What:  Schema creation, idempotency, foreign key enforcement and the
       storage error text helper, against a real temporary SQLite file.
"""

import pytest
from sqlalchemy import func, inspect, select
from sqlalchemy.exc import IntegrityError

from travel_diary.database import Database, storage_error_text
from travel_diary.models.entry import Entry
from travel_diary.models.user import User


@pytest.mark.asyncio
async def test_init_schema_creates_three_tables(database):
    async with database.engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

    assert set(tables) >= {"users", "locations", "entries"}


@pytest.mark.asyncio
async def test_init_schema_is_idempotent(database, test_settings):
    async with database.session_factory() as session:
        session.add(User(username="alice", email="a@x.com"))
        await session.commit()

    # A second process start against the same file
    again = Database(test_settings.database_url)
    await again.init_schema()
    try:
        async with again.session_factory() as session:
            count = (await session.execute(select(func.count(User.id)))).scalar()
    finally:
        await again.dispose()

    assert count == 1


@pytest.mark.asyncio
async def test_foreign_keys_enforced_on_insert(database):
    async with database.session_factory() as session:
        session.add(Entry(title="t", content="c", author_id=99, location_id=99))
        with pytest.raises(IntegrityError) as excinfo:
            await session.flush()

    assert "FOREIGN KEY constraint failed" in storage_error_text(excinfo.value)


@pytest.mark.asyncio
async def test_foreign_keys_can_be_disabled(test_settings):
    db = Database(test_settings.database_url, enforce_foreign_keys=False)
    await db.init_schema()
    try:
        async with db.session_factory() as session:
            session.add(Entry(title="t", content="c", author_id=99, location_id=99))
            await session.commit()
            count = (await session.execute(select(func.count(Entry.id)))).scalar()
    finally:
        await db.dispose()

    assert count == 1


@pytest.mark.asyncio
async def test_ping(database):
    assert await database.ping() is True


def test_storage_error_text_prefers_driver_message():
    exc = IntegrityError("INSERT INTO users ...", {}, Exception("NOT NULL constraint failed: users.email"))

    assert storage_error_text(exc) == "NOT NULL constraint failed: users.email"
    assert storage_error_text(ValueError("plain")) == "plain"
