"""
Base service with the shared session handling.

All entity services inherit from this class to share the database session
and the mapping of SQLAlchemy failures onto ConflictError / StorageError.
"""
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api.exceptions import ConflictError, StorageError

logger = logging.getLogger(__name__)


class BaseService:
    """Holds the injected AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @property
    def db(self) -> AsyncSession:
        return self._db

    async def _execute(self, stmt, context: str) -> Any:
        """Run a statement, wrapping driver failures in StorageError."""
        try:
            return await self._db.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Database error while %s: %s", context, exc)
            raise StorageError(f"Database error while {context}") from exc

    async def _commit(self, context: str, conflict_message: str = "Record already exists") -> None:
        """
        Commit the pending unit of work.

        A unique-constraint hit becomes ConflictError; anything else from the
        driver becomes StorageError. The session is rolled back either way so
        nothing is partially written.
        """
        try:
            await self._db.commit()
        except IntegrityError as exc:
            await self._db.rollback()
            logger.warning("Conflict while %s: %s", context, exc.orig)
            raise ConflictError(conflict_message) from exc
        except SQLAlchemyError as exc:
            await self._db.rollback()
            logger.error("Database error while %s: %s", context, exc)
            raise StorageError(f"Database error while {context}") from exc
