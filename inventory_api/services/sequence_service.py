"""
Sequence service - monotonic numeric ids per sequence name.

Each sequence is one row in the counters table. next_id() increments and
reads it in a single INSERT .. ON CONFLICT DO UPDATE .. RETURNING statement,
so concurrent callers always receive distinct, increasing values. There is
no read-then-write fallback: if the statement fails the caller gets a
StorageError and no id.
"""
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api.exceptions import StorageError
from inventory_api.models.counter import Counter
from inventory_api.utils.db_compat import upsert_increment

logger = logging.getLogger(__name__)


class SequenceService:
    """Identifier generator backed by the counters table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def next_id(self, name: str) -> int:
        """Return the next value of sequence `name` (1 on first use)."""
        table = Counter.__table__
        try:
            dialect_name = self._db.get_bind().dialect.name
            stmt = upsert_increment(dialect_name, table, table.c.name, table.c.seq, name)
            result = await self._db.execute(stmt)
            value = result.scalar_one()
        except SQLAlchemyError as exc:
            logger.error("Could not advance sequence %s: %s", name, exc)
            await self._db.rollback()
            raise StorageError(f"Could not generate next {name}") from exc

        logger.debug("Sequence %s advanced to %s", name, value)
        return value

    async def current(self, name: str) -> int:
        """Last value handed out for `name`, 0 if the sequence was never used."""
        try:
            result = await self._db.execute(select(Counter.seq).where(Counter.name == name))
        except SQLAlchemyError as exc:
            logger.error("Could not read sequence %s: %s", name, exc)
            raise StorageError(f"Could not read sequence {name}") from exc
        return result.scalar_one_or_none() or 0
