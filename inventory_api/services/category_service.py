"""
Category Service.

Categories have no delete path. categoryName is unique (enforced by the
table); categoryId is caller-supplied and not checked for uniqueness.
"""
from __future__ import annotations

import logging
from typing import Any, Sequence

from sqlalchemy import select

from inventory_api.exceptions import ConflictError, NotFoundError
from inventory_api.models.category import Category
from inventory_api.schemas.category import CategoryCreate, CategoryUpdate
from inventory_api.services.base import BaseService
from inventory_api.utils.datetime_utils import utc_now
from inventory_api.utils.validators import parse_payload

logger = logging.getLogger(__name__)


class CategoryService(BaseService):
    """Service for category operations."""

    async def list(self) -> Sequence[Category]:
        result = await self._execute(select(Category), "listing categories")
        return result.scalars().all()

    async def get(self, category_id: str) -> Category:
        """Get a category by its storage id."""
        result = await self._execute(
            select(Category).where(Category.id == category_id),
            "getting category",
        )
        category = result.scalar_one_or_none()
        if category is None:
            raise NotFoundError("Category not found")
        return category

    async def create(self, payload: Any) -> Category:
        """Create a category. dateModified stays unset until the first update."""
        data = parse_payload(CategoryCreate, "Category", payload)

        if data.id is not None:
            existing = await self._execute(
                select(Category.id).where(Category.id == data.id),
                "checking category id",
            )
            if existing.scalar_one_or_none() is not None:
                raise ConflictError(f"Category id already exists: {data.id}")

        # Let the column defaults fill id / dateCreated when not supplied
        values = data.model_dump(exclude_none=True)
        category = Category(**values)
        self._db.add(category)
        await self._commit(
            "creating category",
            conflict_message=f"Category categoryName already exists: {data.category_name}",
        )
        await self._db.refresh(category)
        logger.info("Created category: %s (id=%s)", category.category_name, category.id)
        return category

    async def update(self, category: Category, patch: Any) -> Category:
        """Apply a partial patch and stamp dateModified, even if nothing changed."""
        data = parse_payload(CategoryUpdate, "Category", patch)

        for key, value in data.model_dump(exclude_none=True).items():
            setattr(category, key, value)
        category.date_modified = utc_now()
        name = category.category_name

        await self._commit(
            "updating category",
            conflict_message=f"Category categoryName already exists: {name}",
        )
        await self._db.refresh(category)
        logger.info("Updated category: %s (id=%s)", category.category_name, category.id)
        return category
