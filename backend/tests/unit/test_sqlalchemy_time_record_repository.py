"""Unit tests for SQLAlchemyTimeRecordRepository against in-memory SQLite."""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from app.domain.entities import MAX_DURATION_SECONDS, TimeRecord
from app.domain.exceptions import StorageError
from app.infrastructure.database import Base, build_session_factory
from app.infrastructure.database.repositories import SQLAlchemyTimeRecordRepository


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def repository(engine) -> SQLAlchemyTimeRecordRepository:
    return SQLAlchemyTimeRecordRepository(build_session_factory(engine))


@pytest.mark.asyncio
async def test_round_trip_preserves_identity_and_instant(repository):
    record = TimeRecord.create("Client meeting", 125, user_id="user-1")

    stored = await repository.save(record)
    [listed] = await repository.list_all(user_id="user-1")

    for copy in (stored, listed):
        assert copy.id == record.id
        assert copy.description == "Client meeting"
        assert copy.duration_in_seconds == 125
        assert isinstance(copy.duration_in_seconds, int)
        assert copy.created_at == record.created_at
        assert copy.user_id == "user-1"


@pytest.mark.asyncio
async def test_fractional_duration_survives(repository):
    await repository.save(TimeRecord.create("Quick call", 2.75))

    [listed] = await repository.list_all()

    assert listed.duration_in_seconds == 2.75


@pytest.mark.asyncio
async def test_largest_accepted_duration_survives_exactly(repository):
    await repository.save(TimeRecord.create("Long run", MAX_DURATION_SECONDS))

    [listed] = await repository.list_all()
    assert listed.duration_in_seconds == MAX_DURATION_SECONDS
    assert isinstance(listed.duration_in_seconds, int)


@pytest.mark.asyncio
async def test_list_is_descending_by_created_at(repository):
    now = datetime.now(timezone.utc)
    await repository.save(TimeRecord(description="old", duration_in_seconds=1, created_at=now - timedelta(hours=1)))
    await repository.save(TimeRecord(description="new", duration_in_seconds=1, created_at=now))
    await repository.save(TimeRecord(description="mid", duration_in_seconds=1, created_at=now - timedelta(minutes=1)))

    records = await repository.list_all()

    assert [r.description for r in records] == ["new", "mid", "old"]


@pytest.mark.asyncio
async def test_list_filters_by_owner(repository):
    await repository.save(TimeRecord.create("a", 1, user_id="user-1"))
    await repository.save(TimeRecord.create("b", 1, user_id="user-2"))

    assert [r.description for r in await repository.list_all(user_id="user-2")] == ["b"]
    assert len(await repository.list_all()) == 2


@pytest.mark.asyncio
async def test_empty_table_lists_nothing(repository):
    assert await repository.list_all() == []


@pytest.mark.asyncio
async def test_missing_table_raises_storage_error():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    repository = SQLAlchemyTimeRecordRepository(build_session_factory(engine))
    try:
        with pytest.raises(StorageError) as exc_info:
            await repository.list_all()
        assert exc_info.value.operation == "fetch time records"

        with pytest.raises(StorageError):
            await repository.save(TimeRecord.create("Work", 1))
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_duplicate_id_raises_storage_error(repository):
    record = TimeRecord.create("Work", 1)
    await repository.save(record)

    with pytest.raises(StorageError):
        await repository.save(record)
