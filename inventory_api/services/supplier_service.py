"""
Supplier Service.

supplierId always comes from the sequence service at creation time; a
supplierId in the request payload is ignored.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api.config import get_settings
from inventory_api.exceptions import NotFoundError
from inventory_api.models.supplier import Supplier
from inventory_api.schemas.supplier import SupplierCreate, SupplierUpdate
from inventory_api.services.base import BaseService
from inventory_api.services.sequence_service import SequenceService
from inventory_api.utils.datetime_utils import utc_now
from inventory_api.utils.validators import parse_payload

logger = logging.getLogger(__name__)


class SupplierService(BaseService):
    """Service for supplier operations."""

    def __init__(
        self,
        db: AsyncSession,
        sequences: Optional[SequenceService] = None,
        sequence_name: Optional[str] = None,
    ):
        super().__init__(db)
        self._sequences = sequences or SequenceService(db)
        self._sequence_name = sequence_name or get_settings().SUPPLIER_SEQUENCE

    async def list(self) -> Sequence[Supplier]:
        result = await self._execute(select(Supplier), "listing suppliers")
        return result.scalars().all()

    async def get_by_supplier_id(self, supplier_id: int) -> Supplier:
        result = await self._execute(
            select(Supplier).where(Supplier.supplier_id == supplier_id),
            "getting supplier",
        )
        supplier = result.scalar_one_or_none()
        if supplier is None:
            raise NotFoundError("Supplier not found")
        return supplier

    async def create(self, payload: Any) -> Supplier:
        """
        Validate, draw the next supplierId, then persist.

        Validation runs before the sequence is touched, and a failed
        increment aborts the creation, so no supplier is ever stored
        without an id.
        """
        data = parse_payload(SupplierCreate, "Supplier", payload)

        supplier_id = await self._sequences.next_id(self._sequence_name)
        supplier = Supplier(supplier_id=supplier_id, **data.model_dump())
        self._db.add(supplier)
        await self._commit(
            "creating supplier",
            conflict_message=f"Supplier supplierName already exists: {data.supplier_name}",
        )
        await self._db.refresh(supplier)
        logger.info("Created supplier: %s (supplierId=%s)", supplier.supplier_name, supplier.supplier_id)
        return supplier

    async def update(self, supplier: Supplier, patch: Any) -> Supplier:
        data = parse_payload(SupplierUpdate, "Supplier", patch)

        for key, value in data.model_dump(exclude_none=True).items():
            setattr(supplier, key, value)
        supplier.date_modified = utc_now()
        name = supplier.supplier_name

        await self._commit(
            "updating supplier",
            conflict_message=f"Supplier supplierName already exists: {name}",
        )
        await self._db.refresh(supplier)
        logger.info("Updated supplier: %s (supplierId=%s)", supplier.supplier_name, supplier.supplier_id)
        return supplier
