"""
Inventory item service.

Items point at categories and suppliers by their numeric categoryId /
supplierId values; neither reference is checked at write time.
"""
from __future__ import annotations

import logging
from typing import Any, Sequence

from sqlalchemy import delete, select

from inventory_api.exceptions import NotFoundError
from inventory_api.models.inventory_item import InventoryItem
from inventory_api.schemas.inventory_item import InventoryItemCreate, InventoryItemUpdate
from inventory_api.services.base import BaseService
from inventory_api.utils.datetime_utils import iso_now
from inventory_api.utils.validators import parse_payload

logger = logging.getLogger(__name__)

ITEM_NOT_FOUND = "Item not found"


class InventoryItemService(BaseService):
    """Service for inventory item operations."""

    async def list(self) -> Sequence[InventoryItem]:
        result = await self._execute(select(InventoryItem), "getting items")
        return result.scalars().all()

    async def get_by_id(self, item_id: str) -> InventoryItem:
        """Exact match on the storage id. Raises NotFoundError, never returns None."""
        result = await self._execute(
            select(InventoryItem).where(InventoryItem.id == item_id),
            "getting item",
        )
        item = result.scalar_one_or_none()
        if item is None:
            raise NotFoundError(ITEM_NOT_FOUND)
        return item

    async def list_by_category(self, category_id: int) -> Sequence[InventoryItem]:
        """
        Items whose categoryId matches. An empty match raises NotFoundError,
        unlike list() which returns an empty sequence.
        """
        result = await self._execute(
            select(InventoryItem).where(InventoryItem.category_id == category_id),
            "getting item(s) by category",
        )
        items = result.scalars().all()
        if not items:
            raise NotFoundError("Item(s) by category not found")
        return items

    async def create(self, payload: Any) -> InventoryItem:
        data = parse_payload(InventoryItemCreate, "Item", payload)

        values = data.model_dump()
        if not values["date_created"]:
            values["date_created"] = iso_now()

        item = InventoryItem(**values)
        self._db.add(item)
        await self._commit(
            "creating item",
            conflict_message=f"Item name already exists: {data.name}",
        )
        await self._db.refresh(item)
        logger.info("Created item: %s (id=%s)", item.name, item.id)
        return item

    async def update(self, item_id: str, patch: Any) -> InventoryItem:
        """Look the item up first (404 wins over 400), then validate and apply."""
        item = await self.get_by_id(item_id)
        data = parse_payload(InventoryItemUpdate, "Item", patch)

        for key, value in data.model_dump(exclude_none=True).items():
            if key == "date_created" and not value:
                continue
            setattr(item, key, value)
        item.date_modified = iso_now()

        await self._commit(
            "updating item",
            conflict_message=f"Item name already exists: {data.name}",
        )
        await self._db.refresh(item)
        logger.info("Updated item: %s (id=%s)", item.name, item.id)
        return item

    async def delete_by_id(self, item_id: str) -> int:
        """Hard delete. Returns the number of rows removed; zero raises NotFoundError."""
        result = await self._execute(
            delete(InventoryItem).where(InventoryItem.id == item_id),
            "deleting item",
        )
        deleted = result.rowcount
        if deleted == 0:
            await self._db.rollback()
            raise NotFoundError(ITEM_NOT_FOUND)

        await self._commit("deleting item")
        logger.info("Deleted item id=%s", item_id)
        return deleted
