"""
Service factories for FastAPI dependency injection
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api.database import get_db
from inventory_api.services import (
    CategoryService,
    InventoryItemService,
    SequenceService,
    SupplierService,
)


def get_category_service(db: AsyncSession = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


def get_supplier_service(db: AsyncSession = Depends(get_db)) -> SupplierService:
    return SupplierService(db, sequences=SequenceService(db))


def get_item_service(db: AsyncSession = Depends(get_db)) -> InventoryItemService:
    return InventoryItemService(db)
