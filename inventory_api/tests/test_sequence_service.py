"""
Sequence service tests - atomic counters.
"""
import asyncio

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from inventory_api.database import Base
from inventory_api.exceptions import StorageError
from inventory_api.services.sequence_service import SequenceService


async def test_first_value_is_one(db_session):
    sequences = SequenceService(db_session)
    assert await sequences.current("supplierId") == 0
    assert await sequences.next_id("supplierId") == 1
    assert await sequences.current("supplierId") == 1


async def test_values_strictly_increase(db_session):
    sequences = SequenceService(db_session)
    values = [await sequences.next_id("supplierId") for _ in range(5)]
    assert values == [1, 2, 3, 4, 5]


async def test_sequences_are_independent(db_session):
    sequences = SequenceService(db_session)
    await sequences.next_id("supplierId")
    await sequences.next_id("supplierId")
    assert await sequences.next_id("categoryId") == 1
    assert await sequences.next_id("supplierId") == 3


async def test_concurrent_callers_get_distinct_values(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'seq.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def draw():
        async with factory() as session:
            value = await SequenceService(session).next_id("supplierId")
            await session.commit()
            return value

    try:
        values = await asyncio.gather(*(draw() for _ in range(8)))
    finally:
        await engine.dispose()

    assert sorted(values) == list(range(1, 9))


async def test_storage_failure_raises(db_session):
    await db_session.execute(text("DROP TABLE counters"))
    await db_session.commit()

    with pytest.raises(StorageError):
        await SequenceService(db_session).next_id("supplierId")
