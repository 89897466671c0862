"""
Suppliers API endpoints
"""
from fastapi import APIRouter, Body, Depends
from typing import Any, List

from inventory_api.api.dependencies import get_supplier_service
from inventory_api.schemas.common import MessageResponse
from inventory_api.schemas.supplier import SupplierResponse
from inventory_api.services.supplier_service import SupplierService

router = APIRouter()


@router.get("", response_model=List[SupplierResponse])
async def list_suppliers(service: SupplierService = Depends(get_supplier_service)):
    """List all suppliers"""
    return await service.list()


@router.post("", response_model=MessageResponse)
async def create_supplier(
    payload: Any = Body(None),
    service: SupplierService = Depends(get_supplier_service),
):
    """Create a new supplier; supplierId is generated"""
    supplier = await service.create(payload)
    return {"message": "Supplier created successfully", "id": supplier.id}
